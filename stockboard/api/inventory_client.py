"""Client for the inventory GraphQL API."""

from typing import List, Dict, Any, Optional

import httpx

from .base_client import BaseClient
from ..models.kpi import KpiPoint
from ..models.product import Product, Warehouse, FILTER_ALL
from ..utils.config import get_config
from ..utils.exceptions import InventoryAPIError


class InventoryClient(BaseClient):
    """Typed access to the products, warehouses and KPI operations."""

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None):
        """
        Args:
            base_url: API root; defaults to the configured ``api_url``
            client: Pre-built httpx client (e.g. a FastAPI TestClient)
        """
        config = get_config()
        super().__init__(base_url=base_url or config.env.api_url, client=client)
        self.graphql_path = config.server.graphql_path

    # ------------------------------------------------------------------
    # Low-level GraphQL helper
    # ------------------------------------------------------------------

    def _graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a GraphQL operation and return the ``data`` dict.

        Raises:
            InventoryAPIError: On HTTP failure or top-level GraphQL errors.
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = self.post(self.graphql_path, json=payload)
        except httpx.HTTPError as e:
            raise InventoryAPIError(f"HTTP error: {str(e)}", details={"error": str(e)})

        try:
            body = response.json()
        except ValueError:
            body = {}

        if body.get("errors"):
            messages = [e.get("message", "Unknown error") for e in body["errors"]]
            raise InventoryAPIError(
                "; ".join(messages),
                details={"errors": body["errors"], "status_code": response.status_code}
            )

        if response.status_code != 200:
            raise InventoryAPIError(
                f"GraphQL request failed (HTTP {response.status_code})",
                details={"response": response.text}
            )

        return body.get("data") or {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    _QUERY_PRODUCTS = """
    query GetProducts($search: String, $status: String, $warehouse: String) {
      products(search: $search, status: $status, warehouse: $warehouse) {
        id
        name
        sku
        warehouse
        stock
        demand
      }
    }
    """

    def list_products(
        self,
        search: Optional[str] = None,
        status: str = FILTER_ALL,
        warehouse: str = FILTER_ALL
    ) -> List[Product]:
        """Fetch products matching the filters, in catalog order."""
        variables = {"search": search or "", "status": status, "warehouse": warehouse}
        data = self._graphql(self._QUERY_PRODUCTS, variables)
        return [Product.from_dict(p) for p in data.get("products", [])]

    _QUERY_WAREHOUSES = """
    query GetWarehouses {
      warehouses {
        code
        name
        city
        country
      }
    }
    """

    def list_warehouses(self) -> List[Warehouse]:
        data = self._graphql(self._QUERY_WAREHOUSES)
        return [Warehouse.from_dict(w) for w in data.get("warehouses", [])]

    _QUERY_KPIS = """
    query GetKPIs($range: String!) {
      kpis(range: $range) {
        date
        stock
        demand
      }
    }
    """

    def get_kpis(self, range_token: str) -> List[KpiPoint]:
        data = self._graphql(self._QUERY_KPIS, {"range": range_token})
        return [KpiPoint.from_dict(k) for k in data.get("kpis", [])]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    _MUTATION_UPDATE_DEMAND = """
    mutation UpdateDemand($id: ID!, $demand: Int!) {
      updateDemand(id: $id, demand: $demand) {
        id
        name
        sku
        warehouse
        stock
        demand
      }
    }
    """

    def update_demand(self, product_id: str, demand: int) -> Optional[Product]:
        """
        Set a product's demand.

        Returns:
            The updated product, or None when the server does not know the id.
        """
        data = self._graphql(self._MUTATION_UPDATE_DEMAND, {"id": product_id, "demand": demand})
        product = data.get("updateDemand")
        if product is None:
            self.logger.warning(f"updateDemand returned no product for {product_id}")
            return None
        self.logger.info(f"Updated demand for {product_id}: {demand}")
        return Product.from_dict(product)

    _MUTATION_TRANSFER_STOCK = """
    mutation TransferStock($id: ID!, $from: String!, $to: String!, $qty: Int!) {
      transferStock(id: $id, from: $from, to: $to, qty: $qty) {
        id
        name
        sku
        warehouse
        stock
        demand
      }
    }
    """

    def transfer_stock(self, product_id: str, source: str, destination: str, qty: int) -> Optional[Product]:
        """
        Move ``qty`` of a product from ``source`` to ``destination``.

        Returns:
            The product after the transfer, or None for an unknown id.
        """
        variables = {"id": product_id, "from": source, "to": destination, "qty": qty}
        data = self._graphql(self._MUTATION_TRANSFER_STOCK, variables)
        product = data.get("transferStock")
        if product is None:
            self.logger.warning(f"transferStock returned no product for {product_id}")
            return None
        self.logger.info(f"Transferred {qty} of {product_id}: {source} -> {destination}")
        return Product.from_dict(product)
