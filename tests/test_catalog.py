"""Tests for the in-memory catalog store."""

import threading

import pytest

from stockboard.store.catalog import CatalogStore
from stockboard.utils.exceptions import ProductNotFoundError, ValidationError


class TestCatalogReads:
    """Tests for read operations."""

    def test_seed_catalog(self, store):
        assert len(store.list_products()) == 45
        assert store.warehouse_codes() == ["BLR-A", "PNQ-C", "DEL-B", "MUM-D"]

    def test_list_products_returns_copies(self, store):
        """Mutating a returned product does not touch the catalog."""
        products = store.list_products()
        products[0].stock = 0

        assert store.list_products()[0].stock == 180

    def test_earlier_read_does_not_see_later_mutation(self, store):
        before = store.get_product("P-1002")

        store.update_demand("P-1002", 999)

        assert before.demand == 80
        assert store.get_product("P-1002").demand == 999

    def test_get_product_unknown(self, store):
        with pytest.raises(ProductNotFoundError, match="P-9999"):
            store.get_product("P-9999")

    def test_totals(self, small_store):
        assert small_store.totals() == (334, 400)


class TestUpdateDemand:
    """Tests for the demand mutation."""

    def test_update_demand(self, store):
        updated = store.update_demand("P-1002", 80)

        assert updated.demand == 80
        assert updated.stock == 50
        assert store.get_product("P-1002").demand == 80

    def test_update_demand_changes_status(self, store):
        store.update_demand("P-1001", 180)

        assert store.get_product("P-1001").status.value == "low"

    def test_update_demand_allows_zero(self, store):
        assert store.update_demand("P-1001", 0).demand == 0

    def test_update_demand_unknown_id_is_noop(self, store):
        before = [p.to_dict() for p in store.list_products()]

        result = store.update_demand("P-9999", 5)

        assert result is None
        assert [p.to_dict() for p in store.list_products()] == before

    def test_update_demand_negative(self, store):
        with pytest.raises(ValidationError, match="negative"):
            store.update_demand("P-1002", -1)

        assert store.get_product("P-1002").demand == 80

    @pytest.mark.parametrize("value", ["80", 8.5, True, None])
    def test_update_demand_non_integer(self, store, value):
        with pytest.raises(ValidationError, match="integer"):
            store.update_demand("P-1002", value)


class TestTransferStock:
    """Tests for the stock transfer mutation."""

    def test_transfer_moves_product(self, store):
        """Stock is taken out and granted back; only the warehouse changes."""
        result = store.transfer_stock("P-1004", "DEL-B", "BLR-A", 10)

        assert result.warehouse == "BLR-A"
        assert result.stock == 24
        assert store.get_product("P-1004").warehouse == "BLR-A"

    def test_transfer_full_stock(self, store):
        result = store.transfer_stock("P-1004", "DEL-B", "MUM-D", 24)

        assert result.stock == 24
        assert result.warehouse == "MUM-D"

    def test_transfer_exceeding_stock(self, store):
        with pytest.raises(ValidationError, match="cannot exceed current stock"):
            store.transfer_stock("P-1004", "DEL-B", "BLR-A", 25)

        assert store.get_product("P-1004").warehouse == "DEL-B"

    @pytest.mark.parametrize("qty", [0, -3])
    def test_transfer_non_positive_quantity(self, store, qty):
        with pytest.raises(ValidationError, match="positive"):
            store.transfer_stock("P-1004", "DEL-B", "BLR-A", qty)

    def test_transfer_missing_destination(self, store):
        with pytest.raises(ValidationError, match="required"):
            store.transfer_stock("P-1004", "DEL-B", "", 5)

    def test_transfer_unknown_destination(self, store):
        with pytest.raises(ValidationError, match="Unknown destination"):
            store.transfer_stock("P-1004", "DEL-B", "XXX-Z", 5)

    def test_transfer_to_same_warehouse(self, store):
        with pytest.raises(ValidationError, match="differ"):
            store.transfer_stock("P-1004", "DEL-B", "DEL-B", 5)

    def test_transfer_wrong_source_is_noop(self, store):
        result = store.transfer_stock("P-1004", "PNQ-C", "BLR-A", 5)

        assert result.warehouse == "DEL-B"
        assert result.stock == 24

    def test_transfer_unknown_id(self, store):
        assert store.transfer_stock("P-9999", "DEL-B", "BLR-A", 5) is None


class TestCatalogLifecycle:
    """Tests for store isolation and concurrent writers."""

    def test_stores_do_not_share_products(self, small_store, sample_products):
        small_store.update_demand("P-1", 1)

        assert sample_products[0].demand == 120
        assert CatalogStore().get_product("P-1002").demand == 80

    def test_concurrent_updates(self):
        store = CatalogStore()
        ids = [p.id for p in store.list_products()]

        def worker(offset):
            for i, pid in enumerate(ids):
                store.update_demand(pid, offset + i)

        threads = [threading.Thread(target=worker, args=(n * 1000,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        # Every product ends with a value written by exactly one worker.
        for i, product in enumerate(store.list_products()):
            assert product.demand % 1000 == i
