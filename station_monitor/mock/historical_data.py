"""Synthetic daily history for one station."""
from __future__ import annotations

import random
from datetime import date, timedelta
from typing import List, Optional

from ..models import HistoricalDataPoint
from ..utils.formatting import today_local


def _station_offset(station_id: str) -> float:
    # Small per-station shift so stations do not all share one baseline
    return (sum(ord(c) for c in station_id) % 10) / 10.0


def generate_historical_data(
    station_id: str,
    days: int,
    *,
    end: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> List[HistoricalDataPoint]:
    """One point per calendar day, oldest first, the last one dated `end`.

    Negative day counts are treated as zero.
    """
    rng = rng or random.Random()
    end = end or today_local()
    days = max(0, days)
    offset = _station_offset(station_id)

    points = []
    for i in range(days):
        day = end - timedelta(days=days - 1 - i)
        raining = rng.random() < 0.35
        points.append(HistoricalDataPoint(
            date=day,
            et0=round(rng.uniform(3.0, 6.0), 2),
            rainfall=round(rng.uniform(0.5, 25.0), 2) if raining else 0.0,
            water_level=round(1.2 + offset + rng.uniform(0.0, 1.5), 2),
            temperature=round(rng.uniform(25.0, 35.0), 1),
            humidity=round(rng.uniform(50.0, 90.0), 1),
            wind_speed=round(rng.uniform(1.0, 6.0), 1),
            solar_radiation=round(rng.uniform(200.0, 900.0), 0),
        ))
    return points
