"""Dashboard orchestration: load data, derive cards, track error state."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .explorer import ProductTableView
from .kpi_generator import range_to_days
from .metrics import build_kpi_cards, fill_rate, status_counts
from .product_query import ProductFilters
from ..api.inventory_client import InventoryClient
from ..models.kpi import KpiCard, KpiPoint
from ..models.product import Product, Warehouse
from ..utils.config import get_config
from ..utils.exceptions import BaseAppException
from ..utils.logger import get_api_logger, get_error_logger


@dataclass
class DashboardSnapshot:
    """Everything one render of the dashboard needs."""

    products: List[Product] = field(default_factory=list)
    warehouses: List[Warehouse] = field(default_factory=list)
    kpis: List[KpiPoint] = field(default_factory=list)
    cards: List[KpiCard] = field(default_factory=list)
    status_counts: Dict[str, int] = field(default_factory=dict)
    fill_rate: float = 0.0
    range_token: str = "7d"
    filters: ProductFilters = field(default_factory=ProductFilters)
    error: Optional[str] = None
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def ok(self) -> bool:
        return self.error is None

    def warehouse_name(self, code: str) -> str:
        for w in self.warehouses:
            if w.code == code:
                return w.name
        return code

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "ok": self.ok,
            "error": self.error,
            "range": self.range_token,
            "filters": {
                "search": self.filters.search,
                "warehouse": self.filters.warehouse,
                "status": self.filters.status
            },
            "cards": [c.to_dict() for c in self.cards],
            "status_counts": self.status_counts,
            "fill_rate": round(self.fill_rate, 2),
            "kpis": [k.to_dict() for k in self.kpis],
            "products": [p.to_dict() for p in self.products],
            "warehouses": [w.to_dict() for w in self.warehouses],
            "loaded_at": self.loaded_at.isoformat()
        }


class DashboardService:
    """
    Holds the dashboard's filters and range and reloads on every change.

    A failed load leaves the dashboard in an error state carrying the
    message; ``retry()`` simply issues the same load again.
    """

    def __init__(self, client: InventoryClient, range_token: Optional[str] = None):
        config = get_config()
        self.client = client
        self.logger = get_api_logger()
        self.error_logger = get_error_logger()
        self.range_token = range_token or config.dashboard.default_range
        range_to_days(self.range_token)
        self.filters = ProductFilters()
        self.table = ProductTableView(page_size=config.dashboard.table_page_size)
        self.snapshot: Optional[DashboardSnapshot] = None

    def load(self) -> DashboardSnapshot:
        """Fetch products, warehouses and KPIs and build a snapshot."""
        self.logger.info(
            f"Loading dashboard (range={self.range_token}, search={self.filters.search!r}, "
            f"warehouse={self.filters.warehouse}, status={self.filters.status})"
        )
        try:
            products = self.client.list_products(
                search=self.filters.search,
                status=self.filters.status,
                warehouse=self.filters.warehouse
            )
            warehouses = self.client.list_warehouses()
            kpis = self.client.get_kpis(self.range_token)
        except BaseAppException as e:
            self.error_logger.error(f"Dashboard load failed: {e.message}", extra={"details": e.details})
            self.snapshot = DashboardSnapshot(
                range_token=self.range_token,
                filters=self.filters,
                error=e.message
            )
            return self.snapshot

        self.table.set_products(products)
        self.snapshot = DashboardSnapshot(
            products=products,
            warehouses=warehouses,
            kpis=kpis,
            cards=build_kpi_cards(products, kpis),
            status_counts=status_counts(products),
            fill_rate=fill_rate(products),
            range_token=self.range_token,
            filters=self.filters
        )
        return self.snapshot

    def retry(self) -> DashboardSnapshot:
        return self.load()

    def set_filters(
        self,
        search: Optional[str] = None,
        warehouse: Optional[str] = None,
        status: Optional[str] = None
    ) -> DashboardSnapshot:
        """Change any of the filters and reload."""
        self.filters = ProductFilters(
            search=self.filters.search if search is None else search,
            warehouse=self.filters.warehouse if warehouse is None else warehouse,
            status=self.filters.status if status is None else status
        )
        return self.load()

    def clear_filters(self) -> DashboardSnapshot:
        self.filters = ProductFilters()
        return self.load()

    def set_range(self, range_token: str) -> DashboardSnapshot:
        range_to_days(range_token)
        self.range_token = range_token
        return self.load()
