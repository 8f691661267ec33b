"""KPI time-series and card models."""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class KpiPoint:
    """Aggregate stock and demand for one calendar day."""

    date: str  # ISO yyyy-mm-dd
    stock: int
    demand: int

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "stock": self.stock, "demand": self.demand}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KpiPoint":
        return cls(date=data["date"], stock=int(data["stock"]), demand=int(data["demand"]))


@dataclass
class KpiCard:
    """A single headline figure on the dashboard."""

    title: str
    value: str
    raw_value: float
    trend: float
    color: str
    description: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "title": self.title,
            "value": self.value,
            "raw_value": self.raw_value,
            "trend": round(self.trend, 2),
            "color": self.color,
            "description": self.description
        }
