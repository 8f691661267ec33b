"""Product and warehouse data models."""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Dict, Any


class ProductStatus(str, Enum):
    """Stock health of a product relative to its demand."""

    HEALTHY = "healthy"
    LOW = "low"
    CRITICAL = "critical"


FILTER_ALL = "all"


def product_status(stock: int, demand: int) -> ProductStatus:
    """
    Derive a product's status from its stock and demand.

    ``stock > demand`` is healthy, ``stock == demand`` is low and anything
    below demand is critical. Status is never stored; call this wherever
    a status is needed so it always reflects the current numbers.
    """
    if stock > demand:
        return ProductStatus.HEALTHY
    if stock == demand:
        return ProductStatus.LOW
    return ProductStatus.CRITICAL


@dataclass(frozen=True)
class Warehouse:
    """A stocking location."""

    code: str
    name: str
    city: str
    country: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Warehouse":
        """Create instance from dictionary."""
        return cls(
            code=data["code"],
            name=data["name"],
            city=data["city"],
            country=data["country"]
        )


@dataclass
class Product:
    """A catalog product held in a single warehouse."""

    id: str
    name: str
    sku: str
    warehouse: str
    stock: int
    demand: int

    def __post_init__(self):
        """Validate data."""
        if not self.id:
            raise ValueError("Product id cannot be empty")

        if self.stock < 0:
            raise ValueError("Stock cannot be negative")

        if self.demand < 0:
            raise ValueError("Demand cannot be negative")

    @property
    def status(self) -> ProductStatus:
        return product_status(self.stock, self.demand)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation, including derived status."""
        return {
            "id": self.id,
            "name": self.name,
            "sku": self.sku,
            "warehouse": self.warehouse,
            "stock": self.stock,
            "demand": self.demand,
            "status": self.status.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """Create instance from dictionary. A ``status`` key is ignored."""
        return cls(
            id=data["id"],
            name=data["name"],
            sku=data["sku"],
            warehouse=data["warehouse"],
            stock=int(data["stock"]),
            demand=int(data["demand"])
        )
