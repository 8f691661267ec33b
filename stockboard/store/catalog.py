"""In-memory catalog store for products and warehouses.

The store owns the only mutable copy of the catalog. Mutations run under a
single lock and every read hands back copies, so a caller never sees a
record change underneath it after the read returned.
"""

import threading
from dataclasses import replace
from typing import Iterable, List, Optional, Tuple

from .seed import seed_products, seed_warehouses
from ..models.product import Product, Warehouse
from ..utils.exceptions import ValidationError, ProductNotFoundError
from ..utils.logger import get_catalog_logger


def _require_int(name: str, value) -> int:
    # bool is an int subclass; "True" is not a quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer", details={name: value})
    return value


class CatalogStore:
    """Products and warehouses with read/write operations."""

    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        warehouses: Optional[Iterable[Warehouse]] = None
    ):
        self.logger = get_catalog_logger()
        self._lock = threading.RLock()
        self._products: List[Product] = [
            replace(p) for p in (products if products is not None else seed_products())
        ]
        self._warehouses: Tuple[Warehouse, ...] = tuple(
            warehouses if warehouses is not None else seed_warehouses()
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return copies of all products in catalog order."""
        with self._lock:
            return [replace(p) for p in self._products]

    def list_warehouses(self) -> List[Warehouse]:
        """Return the fixed warehouse list."""
        return list(self._warehouses)

    def warehouse_codes(self) -> List[str]:
        return [w.code for w in self._warehouses]

    def get_product(self, product_id: str) -> Product:
        """
        Look up a single product.

        Raises:
            ProductNotFoundError: If the id is unknown.
        """
        with self._lock:
            product = self._find(product_id)
            if product is None:
                raise ProductNotFoundError(
                    f"Product not found: {product_id}",
                    details={"id": product_id}
                )
            return replace(product)

    def totals(self) -> Tuple[int, int]:
        """Return (total stock, total demand) across the whole catalog."""
        with self._lock:
            return (
                sum(p.stock for p in self._products),
                sum(p.demand for p in self._products)
            )

    def _find(self, product_id: str) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def update_demand(self, product_id: str, demand: int) -> Optional[Product]:
        """
        Set a product's demand.

        Args:
            product_id: Product id
            demand: New demand, a non-negative integer

        Returns:
            A copy of the updated product, or None when the id is unknown
            (the catalog is left untouched).

        Raises:
            ValidationError: If demand is not a non-negative integer.
        """
        demand = _require_int("demand", demand)
        if demand < 0:
            raise ValidationError("Demand cannot be negative", details={"demand": demand})

        with self._lock:
            product = self._find(product_id)
            if product is None:
                self.logger.warning(f"update_demand ignored: unknown product {product_id}")
                return None

            previous = product.demand
            product.demand = demand
            self.logger.info(f"Demand updated for {product_id}: {previous} -> {demand}")
            return replace(product)

    def transfer_stock(self, product_id: str, source: str, destination: str, qty: int) -> Optional[Product]:
        """
        Move a product from one warehouse to another.

        A product lives in exactly one warehouse, so the transfer moves the
        whole record: ``qty`` is taken out of stock and granted back at the
        destination, leaving stock unchanged and the warehouse reassigned.

        Args:
            product_id: Product id
            source: Warehouse code the product is expected to be in
            destination: Warehouse code to move to
            qty: Quantity, positive and not above current stock

        Returns:
            A copy of the product after the transfer. None when the id is
            unknown. When the product is not in ``source`` nothing changes
            and the current product is returned.

        Raises:
            ValidationError: On a bad quantity or destination.
        """
        qty = _require_int("qty", qty)
        if qty <= 0:
            raise ValidationError("Transfer quantity must be positive", details={"qty": qty})
        if not destination:
            raise ValidationError("Destination warehouse is required")
        if destination not in self.warehouse_codes():
            raise ValidationError(
                f"Unknown destination warehouse: {destination}",
                details={"to": destination}
            )
        if destination == source:
            raise ValidationError(
                "Destination must differ from source warehouse",
                details={"from": source, "to": destination}
            )

        with self._lock:
            product = self._find(product_id)
            if product is None:
                self.logger.warning(f"transfer_stock ignored: unknown product {product_id}")
                return None

            if qty > product.stock:
                raise ValidationError(
                    "Transfer quantity cannot exceed current stock",
                    details={"qty": qty, "stock": product.stock}
                )

            if product.warehouse != source:
                self.logger.warning(
                    f"transfer_stock ignored: {product_id} is in {product.warehouse}, not {source}"
                )
                return replace(product)

            product.stock = max(0, product.stock - qty)
            product.warehouse = destination
            product.stock += qty

            self.logger.info(f"Transferred {qty} of {product_id}: {source} -> {destination}")
            return replace(product)
