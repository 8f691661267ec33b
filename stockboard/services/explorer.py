"""Filter, sort and paginate a fetched product list for table views."""

import math
from dataclasses import dataclass, field
from typing import List, Optional

from .product_query import ProductFilters
from ..models.product import Product, product_status
from ..utils.exceptions import ValidationError

ASC = "asc"
DESC = "desc"

SORTABLE_FIELDS = ("id", "name", "sku", "warehouse", "stock", "demand", "status")


def _sort_key(product: Product, sort_field: str):
    if sort_field == "status":
        return product_status(product.stock, product.demand).value
    value = getattr(product, sort_field)
    if isinstance(value, str):
        return value.lower()
    return value


def sort_products(products: List[Product], sort_field: str, direction: str = ASC) -> List[Product]:
    """
    Sort on one field. Strings compare case-insensitively and equal keys
    keep their incoming order in both directions.
    """
    if sort_field not in SORTABLE_FIELDS:
        raise ValidationError(f"Cannot sort by {sort_field}", details={"allowed": list(SORTABLE_FIELDS)})
    if direction not in (ASC, DESC):
        raise ValidationError(f"Unknown sort direction: {direction}")
    return sorted(products, key=lambda p: _sort_key(p, sort_field), reverse=direction == DESC)


@dataclass
class Page:
    """One page of table rows."""

    items: List[Product]
    page: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        return max(1, math.ceil(self.total_items / self.page_size))

    @property
    def start_index(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def summary(self) -> str:
        if not self.total_items:
            return "No results"
        first = self.start_index + 1
        last = min(self.start_index + self.page_size, self.total_items)
        return f"Showing {first} to {last} of {self.total_items} results"


@dataclass
class ProductTableView:
    """
    Table state over an already-fetched product list.

    Holds filters, one active sort field with its direction and the current
    page. Changing filters or sort puts the view back on page 1.
    """

    products: List[Product] = field(default_factory=list)
    page_size: int = 10
    filters: ProductFilters = field(default_factory=ProductFilters)
    sort_field: str = "name"
    sort_direction: str = ASC
    page: int = 1

    def __post_init__(self):
        if self.page_size <= 0:
            raise ValidationError("Page size must be positive", details={"page_size": self.page_size})

    def set_products(self, products: List[Product]):
        """Replace the underlying list after a refetch and go back to page 1."""
        self.products = list(products)
        self.page = 1

    def set_filters(
        self,
        search: Optional[str] = None,
        warehouse: Optional[str] = None,
        status: Optional[str] = None
    ):
        """Update any of the filters given; the others keep their values."""
        self.filters = ProductFilters(
            search=self.filters.search if search is None else search,
            warehouse=self.filters.warehouse if warehouse is None else warehouse,
            status=self.filters.status if status is None else status
        )
        self.page = 1

    def clear_filters(self):
        self.filters = ProductFilters()
        self.page = 1

    def sort_by(self, sort_field: str, direction: Optional[str] = None):
        """
        Select the sort column.

        Picking the active column again flips the direction; a new column
        starts ascending unless ``direction`` is given.
        """
        if sort_field not in SORTABLE_FIELDS:
            raise ValidationError(f"Cannot sort by {sort_field}", details={"allowed": list(SORTABLE_FIELDS)})

        if direction is not None:
            if direction not in (ASC, DESC):
                raise ValidationError(f"Unknown sort direction: {direction}")
            self.sort_direction = direction
        elif sort_field == self.sort_field:
            self.sort_direction = DESC if self.sort_direction == ASC else ASC
        else:
            self.sort_direction = ASC

        self.sort_field = sort_field
        self.page = 1

    def filtered(self) -> List[Product]:
        return [p for p in self.products if self.filters.matches(p)]

    def sorted(self) -> List[Product]:
        return sort_products(self.filtered(), self.sort_field, self.sort_direction)

    def page_count(self) -> int:
        return max(1, math.ceil(len(self.filtered()) / self.page_size))

    def go_to(self, page: int):
        self.page = min(max(1, page), self.page_count())

    def current_page(self) -> Page:
        rows = self.sorted()
        page = min(max(1, self.page), max(1, math.ceil(len(rows) / self.page_size)))
        start = (page - 1) * self.page_size
        return Page(
            items=rows[start:start + self.page_size],
            page=page,
            page_size=self.page_size,
            total_items=len(rows)
        )
