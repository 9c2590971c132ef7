"""
Trend Service - historical data to chart series
- Chart rows are plain dicts {"date": label, "value": float | None}
- None marks a missing reading; charts connect across it
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union
import random

from ..models import METRICS, ChartPoint, HistoricalDataPoint
from ..utils.formatting import format_chart_label

PointLike = Union[ChartPoint, Mapping[str, Any]]


def build_series(history: Sequence[HistoricalDataPoint], metric: str) -> List[Dict[str, Any]]:
    """Project one metric out of the daily history, oldest first."""
    if metric not in METRICS:
        raise ValueError(f"Unknown sensor metric: {metric}")
    return [
        {"date": format_chart_label(point.date), "value": getattr(point, metric)}
        for point in history
    ]


def jitter(base: float, spread: float, rng: Optional[random.Random] = None) -> float:
    """base + uniform[0, spread) - placeholder for readings with no data source yet."""
    rng = rng or random
    return base + rng.random() * spread


def jitter_series(
    history: Sequence[HistoricalDataPoint],
    center: float,
    spread: float,
    rng: Optional[random.Random] = None,
) -> List[Dict[str, Any]]:
    """Series of center +/- spread/2 values on the history's dates (mock metrics)."""
    rng = rng or random
    return [
        {"date": format_chart_label(point.date), "value": round(center + (rng.random() * spread - spread / 2), 2)}
        for point in history
    ]


def _value_of(point: PointLike) -> Optional[float]:
    if isinstance(point, ChartPoint):
        return point.value
    return point.get("value")


def defined_values(points: Iterable[PointLike]) -> List[float]:
    return [v for v in (_value_of(p) for p in points) if v is not None]


def summarize_series(points: Iterable[PointLike]) -> Dict[str, float]:
    """
    Header statistics of a trend chart

    Returns:
        {"latest": last defined value, "average": mean of defined values};
        both 0.0 when nothing is defined
    """
    values = defined_values(points)
    if not values:
        return {"latest": 0.0, "average": 0.0}
    return {"latest": values[-1], "average": sum(values) / len(values)}
