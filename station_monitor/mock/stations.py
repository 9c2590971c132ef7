"""Mock station collaborator - stands in for the sensor data source."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List

from ..models import Location, SensorReadings, Station, StationStatus

WEATHER_DEVICE = "ISMMA2300"
WATER_DEVICE = "DQA230.1"

# id, name, status, lat, lng, minutes since last report, device, readings
_STATIONS = [
    ("station-1", "Mukdahan Agro-Met Station", StationStatus.ONLINE, 16.5434, 104.7235, 2, WEATHER_DEVICE,
     dict(temperature=31.2, humidity=68.0, wind_speed=3.4, solar_radiation=742.0, et0=4.86, rainfall=0.0, water_level=1.92)),
    ("station-2", "Lam Pao Reservoir Gauge", StationStatus.ONLINE, 16.6120, 103.4410, 5, WATER_DEVICE,
     dict(temperature=29.8, humidity=74.0, wind_speed=2.1, solar_radiation=655.0, et0=4.12, rainfall=12.4, water_level=2.85)),
    ("station-3", "Nakhon Phanom Field Site", StationStatus.WARNING, 17.3920, 104.7690, 47, WEATHER_DEVICE,
     dict(temperature=33.5, humidity=55.0, wind_speed=5.2, solar_radiation=810.0, et0=5.64, rainfall=0.0, water_level=1.15)),
    ("station-4", "Huai Luang Canal Gauge", StationStatus.OFFLINE, 17.1480, 102.8650, 410, WATER_DEVICE,
     dict(temperature=28.1, humidity=81.0, wind_speed=1.3, solar_radiation=402.0, et0=3.02, rainfall=22.8, water_level=3.41)),
    ("station-5", "Sakon Nakhon Rice Research", StationStatus.ONLINE, 17.1550, 104.1480, 1, WEATHER_DEVICE,
     dict(temperature=30.6, humidity=70.0, wind_speed=2.9, solar_radiation=701.0, et0=4.55, rainfall=3.2, water_level=1.74)),
    ("station-6", "Nong Han Lake Level", StationStatus.CRITICAL, 17.2010, 104.1630, 12, WATER_DEVICE,
     dict(temperature=29.2, humidity=77.0, wind_speed=2.4, solar_radiation=588.0, et0=3.88, rainfall=31.5, water_level=4.27)),
    ("station-7", "Kalasin Orchard Station", StationStatus.ONLINE, 16.4320, 103.5060, 3, WEATHER_DEVICE,
     dict(temperature=32.0, humidity=62.0, wind_speed=3.9, solar_radiation=768.0, et0=5.08, rainfall=0.6, water_level=1.58)),
    ("station-8", "Mun River Weir Gauge", StationStatus.WARNING, 15.2440, 104.8470, 95, WATER_DEVICE,
     dict(temperature=30.1, humidity=72.0, wind_speed=2.7, solar_radiation=690.0, et0=4.31, rainfall=8.9, water_level=3.06)),
]


def get_stations(now: datetime | None = None) -> List[Station]:
    """Current station set. A fresh list on every call."""
    now = now or datetime.now(timezone.utc)
    return [
        Station(
            id=sid,
            name=name,
            status=status,
            location=Location(lat=lat, lng=lng),
            last_updated=now - timedelta(minutes=age),
            sensors=SensorReadings(**readings),
            device_model=device,
        )
        for sid, name, status, lat, lng, age, device, readings in _STATIONS
    ]
