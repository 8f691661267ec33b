"""Demand updates and stock transfers driven from user input."""

from typing import Callable, List, Optional

from ..api.inventory_client import InventoryClient
from ..models.notification import Notification
from ..models.product import Product, Warehouse
from ..utils.exceptions import BaseAppException
from ..utils.logger import get_api_logger

INVALID_DEMAND = "Please enter a valid demand value"
INVALID_QUANTITY = "Please enter a valid quantity"
QUANTITY_EXCEEDS_STOCK = "Transfer quantity cannot exceed current stock"
MISSING_DESTINATION = "Please select a destination warehouse"
PRODUCT_NOT_FOUND = "Product not found: {id}"


def parse_int(raw) -> Optional[int]:
    """Parse form input as an integer; None when it is not one."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return None


def destination_choices(product: Product, warehouses: List[Warehouse]) -> List[Warehouse]:
    """Warehouses a product can be moved to: all but its current one."""
    return [w for w in warehouses if w.code != product.warehouse]


class ProductActions:
    """
    Validate user input, then send the mutation.

    Every call returns a Notification; nothing is sent when input fails
    validation. ``on_update`` runs after each successful mutation, usually
    to reload the dashboard.
    """

    def __init__(self, client: InventoryClient, on_update: Optional[Callable[[], object]] = None):
        self.client = client
        self.on_update = on_update
        self.logger = get_api_logger()

    def update_demand(self, product: Product, raw_demand) -> Notification:
        demand = parse_int(raw_demand)
        if demand is None or demand < 0:
            return Notification.error(INVALID_DEMAND, details={"input": raw_demand})

        try:
            updated = self.client.update_demand(product.id, demand)
        except BaseAppException as e:
            self.logger.error(f"Demand update failed for {product.id}: {e.message}")
            return Notification.error(f"Error updating demand: {e.message}", details=e.details)

        if updated is None:
            return self._not_found("Error updating demand", product)

        self._notify_update()
        return Notification.success(
            "Demand updated successfully!",
            details={"product": updated.to_dict()}
        )

    def transfer_stock(self, product: Product, raw_qty, destination: Optional[str]) -> Notification:
        qty = parse_int(raw_qty)
        if qty is None or qty <= 0:
            return Notification.error(INVALID_QUANTITY, details={"input": raw_qty})
        if qty > product.stock:
            return Notification.error(QUANTITY_EXCEEDS_STOCK, details={"qty": qty, "stock": product.stock})
        if not destination:
            return Notification.error(MISSING_DESTINATION)

        try:
            updated = self.client.transfer_stock(product.id, product.warehouse, destination, qty)
        except BaseAppException as e:
            self.logger.error(f"Stock transfer failed for {product.id}: {e.message}")
            return Notification.error(f"Error transferring stock: {e.message}", details=e.details)

        if updated is None:
            return self._not_found("Error transferring stock", product)

        self._notify_update()
        return Notification.success(
            "Stock transferred successfully!",
            details={"product": updated.to_dict()}
        )

    def _not_found(self, prefix: str, product: Product) -> Notification:
        message = PRODUCT_NOT_FOUND.format(id=product.id)
        self.logger.warning(f"{prefix}: {message}")
        return Notification.error(f"{prefix}: {message}", details={"id": product.id})

    def _notify_update(self):
        if self.on_update is not None:
            self.on_update()
