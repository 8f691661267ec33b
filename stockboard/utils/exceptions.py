"""Exceptions raised by the catalog, the API and the client."""

from typing import Any, Dict, Optional


class BaseAppException(Exception):
    """
    Root of the stockboard exception tree.

    ``code`` is the machine-readable error code reported to GraphQL
    clients under ``extensions.code``.
    """

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_extensions(self) -> Dict[str, Any]:
        """GraphQL error extensions for this exception."""
        extensions: Dict[str, Any] = {"code": self.code}
        if self.details:
            extensions["details"] = self.details
        return extensions


class ValidationError(BaseAppException):
    """Raised when mutation input or a query argument is invalid."""
    code = "VALIDATION_ERROR"


class ProductNotFoundError(BaseAppException):
    """Raised when a product id is not in the catalog."""
    code = "NOT_FOUND"


class InventoryAPIError(BaseAppException):
    """Raised when the inventory GraphQL API returns an error or cannot be reached."""
    code = "UPSTREAM_ERROR"


class ConfigurationError(BaseAppException):
    code = "CONFIGURATION_ERROR"
