"""Tests for demand and transfer actions."""

from unittest.mock import MagicMock

import pytest

from stockboard.models.product import Product
from stockboard.services.product_actions import (
    INVALID_DEMAND,
    INVALID_QUANTITY,
    MISSING_DESTINATION,
    QUANTITY_EXCEEDS_STOCK,
    ProductActions,
    destination_choices,
    parse_int,
)
from stockboard.utils.exceptions import InventoryAPIError


@pytest.fixture
def bearing():
    return Product(id="P-1004", name="Bearing 608ZZ", sku="BRG-608-50", warehouse="DEL-B", stock=24, demand=120)


@pytest.fixture
def mock_client(bearing):
    client = MagicMock()
    client.update_demand.return_value = bearing
    client.transfer_stock.return_value = bearing
    return client


class TestParseInt:
    """Tests for form input parsing."""

    @pytest.mark.parametrize("raw,expected", [
        ("12", 12), (" 7 ", 7), (5, 5), ("-3", -3), ("", None), ("abc", None), ("1.5", None), (None, None), (True, None),
    ])
    def test_parse_int(self, raw, expected):
        assert parse_int(raw) == expected


class TestUpdateDemand:
    """Tests for ProductActions.update_demand."""

    @pytest.mark.parametrize("raw", ["", "abc", "-1"])
    def test_invalid_input_sends_nothing(self, mock_client, bearing, raw):
        notification = ProductActions(mock_client).update_demand(bearing, raw)

        assert notification.message == INVALID_DEMAND
        mock_client.update_demand.assert_not_called()

    def test_success(self, mock_client, bearing):
        on_update = MagicMock()

        notification = ProductActions(mock_client, on_update=on_update).update_demand(bearing, "80")

        assert notification.ok
        assert notification.message == "Demand updated successfully!"
        mock_client.update_demand.assert_called_once_with("P-1004", 80)
        on_update.assert_called_once()

    def test_zero_is_valid(self, mock_client, bearing):
        assert ProductActions(mock_client).update_demand(bearing, "0").ok

    def test_api_error(self, mock_client, bearing):
        mock_client.update_demand.side_effect = InventoryAPIError("Demand cannot be negative")
        on_update = MagicMock()

        notification = ProductActions(mock_client, on_update=on_update).update_demand(bearing, "3")

        assert notification.message == "Error updating demand: Demand cannot be negative"
        on_update.assert_not_called()

    def test_unknown_product(self, mock_client, bearing):
        mock_client.update_demand.return_value = None
        on_update = MagicMock()

        notification = ProductActions(mock_client, on_update=on_update).update_demand(bearing, "5")

        assert not notification.ok
        assert notification.message == "Error updating demand: Product not found: P-1004"
        on_update.assert_not_called()

    def test_unknown_product_end_to_end(self, inventory_client, store):
        ghost = Product(id="P-9999", name="Ghost", sku="GHO-1", warehouse="DEL-B", stock=10, demand=5)

        notification = ProductActions(inventory_client).update_demand(ghost, "5")

        assert not notification.ok
        assert "Product not found: P-9999" in notification.message
        assert len(store.list_products()) == 45


class TestTransferStock:
    """Tests for ProductActions.transfer_stock."""

    @pytest.mark.parametrize("raw", ["", "zero", "0", "-5"])
    def test_invalid_quantity(self, mock_client, bearing, raw):
        notification = ProductActions(mock_client).transfer_stock(bearing, raw, "BLR-A")

        assert notification.message == INVALID_QUANTITY
        mock_client.transfer_stock.assert_not_called()

    def test_quantity_above_stock(self, mock_client, bearing):
        notification = ProductActions(mock_client).transfer_stock(bearing, "25", "BLR-A")

        assert notification.message == QUANTITY_EXCEEDS_STOCK
        mock_client.transfer_stock.assert_not_called()

    def test_missing_destination(self, mock_client, bearing):
        notification = ProductActions(mock_client).transfer_stock(bearing, "10", "")

        assert notification.message == MISSING_DESTINATION

    def test_success(self, mock_client, bearing):
        notification = ProductActions(mock_client).transfer_stock(bearing, "10", "BLR-A")

        assert notification.ok
        assert notification.message == "Stock transferred successfully!"
        mock_client.transfer_stock.assert_called_once_with("P-1004", "DEL-B", "BLR-A", 10)

    def test_api_error(self, mock_client, bearing):
        mock_client.transfer_stock.side_effect = InventoryAPIError("Unknown destination warehouse: X")

        notification = ProductActions(mock_client).transfer_stock(bearing, "10", "X")

        assert not notification.ok
        assert notification.message.startswith("Error transferring stock:")

    def test_unknown_product(self, mock_client, bearing):
        mock_client.transfer_stock.return_value = None
        on_update = MagicMock()

        notification = ProductActions(mock_client, on_update=on_update).transfer_stock(bearing, "10", "BLR-A")

        assert not notification.ok
        assert notification.message == "Error transferring stock: Product not found: P-1004"
        on_update.assert_not_called()

    def test_unknown_product_end_to_end(self, inventory_client, store):
        ghost = Product(id="P-9999", name="Ghost", sku="GHO-1", warehouse="DEL-B", stock=10, demand=5)
        before = store.list_products()

        notification = ProductActions(inventory_client).transfer_stock(ghost, "5", "BLR-A")

        assert not notification.ok
        assert "Product not found: P-9999" in notification.message
        assert store.list_products() == before

    def test_end_to_end(self, inventory_client, store):
        product = store.get_product("P-1004")

        notification = ProductActions(inventory_client).transfer_stock(product, "10", "BLR-A")

        assert notification.ok
        assert notification.details["product"]["warehouse"] == "BLR-A"
        assert store.get_product("P-1004").stock == 24


class TestDestinationChoices:
    """Tests for destination_choices."""

    def test_excludes_current_warehouse(self, bearing, store):
        choices = destination_choices(bearing, store.list_warehouses())

        assert [w.code for w in choices] == ["BLR-A", "PNQ-C", "MUM-D"]
