"""Product filtering shared by the GraphQL resolvers and the table views."""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..models.product import Product, ProductStatus, FILTER_ALL, product_status
from ..utils.exceptions import ValidationError

VALID_STATUS_FILTERS = {FILTER_ALL} | {s.value for s in ProductStatus}


@dataclass
class ProductFilters:
    """Search, warehouse and status criteria, combined with AND."""

    search: str = ""
    warehouse: str = FILTER_ALL
    status: str = FILTER_ALL

    def __post_init__(self):
        self.search = self.search or ""
        self.warehouse = self.warehouse or FILTER_ALL
        self.status = self.status or FILTER_ALL
        if self.status not in VALID_STATUS_FILTERS:
            raise ValidationError(
                f"Unknown status filter: {self.status}",
                details={"status": self.status, "allowed": sorted(VALID_STATUS_FILTERS)}
            )

    @property
    def is_active(self) -> bool:
        return bool(self.search) or self.warehouse != FILTER_ALL or self.status != FILTER_ALL

    def matches(self, product: Product) -> bool:
        return (
            matches_search(product, self.search)
            and matches_warehouse(product, self.warehouse)
            and matches_status(product, self.status)
        )


def matches_search(product: Product, search: Optional[str]) -> bool:
    """Case-insensitive substring match over name, SKU and id."""
    if not search:
        return True
    needle = search.lower()
    return (
        needle in product.name.lower()
        or needle in product.sku.lower()
        or needle in product.id.lower()
    )


def matches_warehouse(product: Product, warehouse: Optional[str]) -> bool:
    if not warehouse or warehouse == FILTER_ALL:
        return True
    return product.warehouse == warehouse


def matches_status(product: Product, status: Optional[str]) -> bool:
    if not status or status == FILTER_ALL:
        return True
    return product_status(product.stock, product.demand).value == status


def filter_products(
    products: Iterable[Product],
    search: Optional[str] = None,
    warehouse: Optional[str] = None,
    status: Optional[str] = None
) -> List[Product]:
    """
    Filter products, keeping their original relative order.

    Args:
        products: Products to filter
        search: Substring matched against name, SKU or id
        warehouse: Warehouse code, or "all"/None for any
        status: healthy, low or critical, or "all"/None for any

    Returns:
        The matching products.
    """
    filters = ProductFilters(search=search, warehouse=warehouse, status=status)
    return [p for p in products if filters.matches(p)]
