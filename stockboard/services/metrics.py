"""Aggregate figures behind the dashboard KPI cards."""

from typing import Dict, Iterable, List, Optional, Sequence

from ..models.kpi import KpiCard, KpiPoint
from ..models.product import Product, ProductStatus, product_status
from ..utils.config import get_config


def total_stock(products: Iterable[Product]) -> int:
    return sum(p.stock for p in products)


def total_demand(products: Iterable[Product]) -> int:
    return sum(p.demand for p in products)


def fill_rate(products: Iterable[Product]) -> float:
    """
    Share of demand that current stock can cover, as a percentage.

    ``sum(min(stock, demand)) / sum(demand) * 100``; 0 when there is no demand.
    """
    products = list(products)
    demand = total_demand(products)
    if demand <= 0:
        return 0.0
    fulfilled = sum(min(p.stock, p.demand) for p in products)
    return fulfilled / demand * 100


def product_fill_rate(product: Product) -> float:
    if product.demand <= 0:
        return 100.0
    return min(product.stock, product.demand) / product.demand * 100


def status_counts(products: Iterable[Product]) -> Dict[str, int]:
    counts = {status.value: 0 for status in ProductStatus}
    for p in products:
        counts[product_status(p.stock, p.demand).value] += 1
    return counts


def series_trend(kpis: Sequence[KpiPoint], field: str) -> float:
    """Percent change of ``field`` between the first and last KPI points."""
    if len(kpis) < 2:
        return 0.0
    first = getattr(kpis[0], field)
    last = getattr(kpis[-1], field)
    if not first:
        return 0.0
    return (last - first) / first * 100


def fill_rate_band(rate: float, good: Optional[float] = None, warning: Optional[float] = None) -> str:
    """Colour band for a fill rate: green, yellow or red."""
    config = get_config().dashboard
    good = config.fill_rate_good if good is None else good
    warning = config.fill_rate_warning if warning is None else warning
    if rate > good:
        return "green"
    if rate > warning:
        return "yellow"
    return "red"


BAND_TRENDS = {"green": 5.0, "yellow": 0.0, "red": -5.0}


def format_number(value) -> str:
    """Thousands-separated number, e.g. 12,345."""
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.2f}"
    return f"{int(value):,}"


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def build_kpi_cards(products: Iterable[Product], kpis: Sequence[KpiPoint]) -> List[KpiCard]:
    """
    Build the Total Stock, Total Demand and Fill Rate cards.

    Args:
        products: Products currently shown on the dashboard
        kpis: KPI series for the selected range, oldest first

    Returns:
        The three cards in display order.
    """
    products = list(products)
    stock = total_stock(products)
    demand = total_demand(products)
    rate = fill_rate(products)
    band = fill_rate_band(rate)

    return [
        KpiCard(
            title="Total Stock",
            value=format_number(stock),
            raw_value=stock,
            trend=series_trend(kpis, "stock"),
            color="blue",
            description="Units in inventory"
        ),
        KpiCard(
            title="Total Demand",
            value=format_number(demand),
            raw_value=demand,
            trend=series_trend(kpis, "demand"),
            color="purple",
            description="Units requested"
        ),
        KpiCard(
            title="Fill Rate",
            value=format_percentage(rate),
            raw_value=rate,
            trend=BAND_TRENDS[band],
            color=band,
            description="Demand fulfillment"
        ),
    ]
