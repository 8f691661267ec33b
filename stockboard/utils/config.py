"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yml"


class APIConfig(BaseModel):
    """Inventory API client settings."""
    timeout: int = 30
    max_retries: int = 3
    retry_delay: int = 1
    exponential_backoff: bool = True


class ServerConfig(BaseModel):
    """GraphQL server settings."""
    graphql_path: str = "/graphql"
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]


class DashboardConfig(BaseModel):
    """Presentation defaults."""
    default_range: str = "7d"
    table_page_size: int = 10
    explorer_page_size: int = 12
    fill_rate_good: float = 80.0
    fill_rate_warning: float = 60.0


class LoggingFilesConfig(BaseModel):
    """Log file paths."""
    server: str = "logs/server.log"
    catalog: str = "logs/catalog.log"
    error: str = "logs/error.log"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5
    files: LoggingFilesConfig = LoggingFilesConfig()


class YAMLConfig(BaseModel):
    """Configuration loaded from YAML file."""
    api: APIConfig = APIConfig()
    server: ServerConfig = ServerConfig()
    dashboard: DashboardConfig = DashboardConfig()
    logging: LoggingConfig = LoggingConfig()


class Settings(BaseSettings):
    """Application settings from environment variables."""

    environment: str = Field(default="development", description="Environment (development/production)")
    log_level: Optional[str] = Field(default=None, description="Override log level")
    host: str = Field(default="0.0.0.0", description="Server bind address")
    port: int = Field(default=4000, description="Server port")
    api_url: str = Field(default="http://localhost:4000", description="Inventory API base URL used by the CLI")

    model_config = SettingsConfigDict(
        env_prefix="STOCKBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class AppConfig:
    """Combined application configuration."""

    def __init__(self, config_path: Path = CONFIG_PATH):
        self.env = Settings()
        self.yaml = self._load_yaml(Path(config_path))

        # Override log level if specified in env
        if self.env.log_level:
            self.yaml.logging.level = self.env.log_level

    @staticmethod
    def _load_yaml(config_path: Path) -> YAMLConfig:
        """Read the YAML file; built-in defaults when it does not exist."""
        if not config_path.exists():
            return YAMLConfig()
        try:
            with open(config_path, "r") as f:
                yaml_data = yaml.safe_load(f) or {}
            return YAMLConfig(**yaml_data)
        except (yaml.YAMLError, PydanticValidationError, TypeError) as e:
            raise ConfigurationError(
                f"Invalid configuration file: {config_path}",
                details={"error": str(e)}
            ) from e

    @property
    def api(self) -> APIConfig:
        return self.yaml.api

    @property
    def server(self) -> ServerConfig:
        return self.yaml.server

    @property
    def dashboard(self) -> DashboardConfig:
        return self.yaml.dashboard

    @property
    def logging(self) -> LoggingConfig:
        return self.yaml.logging

    @property
    def is_production(self) -> bool:
        return self.env.environment.lower() == "production"


@lru_cache()
def get_config() -> AppConfig:
    """Get cached configuration instance."""
    return AppConfig()
