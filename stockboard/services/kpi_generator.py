"""Deterministic daily KPI series.

Each day's figures are the current catalog totals nudged by an offset
derived from a hash of ``"{date}-{metric}-{range}"``. The same day, range
and totals always give the same series; nothing is stored between calls.
"""

import math
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional

from ..models.kpi import KpiPoint
from ..models.product import Product
from ..utils.exceptions import ValidationError

RANGE_DAYS = {"7d": 7, "14d": 14, "30d": 30}

FNV_OFFSET_BASIS = 2166136261
UINT32_MASK = 0xFFFFFFFF

STOCK_SPREAD = 0.2     # +/-10%
DEMAND_SPREAD = 0.15   # +/-7.5%


def range_to_days(range_token: str) -> int:
    """Map a range token (7d, 14d, 30d) to a number of days."""
    try:
        return RANGE_DAYS[range_token]
    except KeyError:
        raise ValidationError(
            f"Unknown range: {range_token}",
            details={"range": range_token, "allowed": list(RANGE_DAYS)}
        )


def seeded_unit(seed: str) -> float:
    """
    Hash ``seed`` to a float in [0, 1].

    32-bit FNV-style mix over the UTF-16 code units of the seed.
    """
    h = FNV_OFFSET_BASIS
    encoded = seed.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        h ^= encoded[i] | (encoded[i + 1] << 8)
        h = (h + (h << 1) + (h << 4) + (h << 7) + (h << 8) + (h << 24)) & UINT32_MASK
    return h / UINT32_MASK


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def generate_kpis(
    products: Iterable[Product],
    range_token: str,
    today: Optional[date] = None
) -> List[KpiPoint]:
    """
    Build the KPI series for a range, oldest day first.

    Args:
        products: Products whose totals anchor the series
        range_token: "7d", "14d" or "30d"
        today: Last day of the series (defaults to the current UTC date)

    Returns:
        One KpiPoint per day.
    """
    days = range_to_days(range_token)
    today = today or utc_today()

    products = list(products)
    base_stock = sum(p.stock for p in products)
    base_demand = sum(p.demand for p in products)

    points = []
    for offset in range(days - 1, -1, -1):
        iso = (today - timedelta(days=offset)).isoformat()

        stock_seed = seeded_unit(f"{iso}-stock-{range_token}") - 0.5
        demand_seed = seeded_unit(f"{iso}-demand-{range_token}") - 0.5

        points.append(KpiPoint(
            date=iso,
            stock=round_half_up(base_stock * (1 + stock_seed * STOCK_SPREAD)),
            demand=round_half_up(base_demand * (1 + demand_seed * DEMAND_SPREAD))
        ))

    return points
