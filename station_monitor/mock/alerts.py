"""Mock alert collaborator."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List

from ..models import Alert, AlertCategory

# id, station id, station name, category, message, minutes ago, acknowledged
_ALERTS = [
    ("alert-1", "station-4", "Huai Luang Canal Gauge", AlertCategory.OFFLINE,
     "No data received for more than 6 hours", 35, False),
    ("alert-2", "station-6", "Nong Han Lake Level", AlertCategory.OTHER,
     "Water level above critical threshold (4.0 m)", 50, False),
    ("alert-3", "station-3", "Nakhon Phanom Field Site", AlertCategory.WEATHER,
     "High ET0 detected, irrigation demand rising", 95, False),
    ("alert-4", "station-8", "Mun River Weir Gauge", AlertCategory.WEATHER,
     "Heavy rainfall expected in the next 24 hours", 180, True),
    ("alert-5", "station-2", "Lam Pao Reservoir Gauge", AlertCategory.OTHER,
     "Sensor calibration due", 360, False),
    ("alert-6", "station-3", "Nakhon Phanom Field Site", AlertCategory.OFFLINE,
     "Intermittent connection, 3 missed reports", 720, True),
    ("alert-7", "station-5", "Sakon Nakhon Rice Research", AlertCategory.WEATHER,
     "Wind gusts above 10 m/s recorded", 1440, True),
]


def get_alerts(now: datetime | None = None) -> List[Alert]:
    now = now or datetime.now(timezone.utc)
    return [
        Alert(
            id=aid,
            station_id=sid,
            station_name=name,
            category=category,
            message=message,
            timestamp=now - timedelta(minutes=age),
            acknowledged=acked,
        )
        for aid, sid, name, category, message, age, acked in _ALERTS
    ]
