"""User-facing notification model."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Any, Optional

SUCCESS = "success"
ERROR = "error"


@dataclass
class Notification:
    """Outcome of a user action, shown as a toast-style message."""

    level: str
    message: str
    details: Optional[Dict[str, Any]] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def ok(self) -> bool:
        return self.level == SUCCESS

    @classmethod
    def success(cls, message: str, details: Optional[Dict[str, Any]] = None) -> "Notification":
        return cls(level=SUCCESS, message=message, details=details)

    @classmethod
    def error(cls, message: str, details: Optional[Dict[str, Any]] = None) -> "Notification":
        return cls(level=ERROR, message=message, details=details)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "level": self.level,
            "message": self.message,
            "details": self.details,
            "timestamp": self.timestamp.isoformat()
        }
