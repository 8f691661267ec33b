"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from stockboard.api.inventory_client import InventoryClient
from stockboard.api.server import create_app
from stockboard.models.product import Product, Warehouse
from stockboard.store.catalog import CatalogStore


@pytest.fixture
def sample_warehouses():
    """A two-warehouse layout for small catalogs."""
    return [
        Warehouse(code="BLR-A", name="Bangalore Alpha", city="Bangalore", country="India"),
        Warehouse(code="DEL-B", name="Delhi Beta", city="Delhi", country="India"),
    ]


@pytest.fixture
def sample_products():
    """One product per status, spread over two warehouses."""
    return [
        Product(id="P-1", name="Hex Bolt", sku="HEX-12", warehouse="BLR-A", stock=180, demand=120),
        Product(id="P-2", name="steel washer", sku="WSR-08", warehouse="BLR-A", stock=50, demand=80),
        Product(id="P-3", name="M8 Nut", sku="NUT-08", warehouse="DEL-B", stock=80, demand=80),
        Product(id="P-4", name="Bearing", sku="BRG-608", warehouse="DEL-B", stock=24, demand=120),
    ]


@pytest.fixture
def store():
    """A catalog seeded with the standard fixture data."""
    return CatalogStore()


@pytest.fixture
def small_store(sample_products, sample_warehouses):
    return CatalogStore(products=sample_products, warehouses=sample_warehouses)


@pytest.fixture
def fixed_today():
    return date(2024, 3, 10)


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def http_client(app):
    """FastAPI test client talking to the in-process API."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def inventory_client(http_client):
    """InventoryClient routed through the test client."""
    return InventoryClient(client=http_client)
