"""
Pytest configuration and shared fixtures for all tests.
"""

from datetime import datetime, timezone

import pytest

from station_monitor.mock.alerts import get_alerts
from station_monitor.mock.stations import get_stations
from station_monitor.models import Location, SensorReadings, Station, StationStatus

FIXED_NOW = datetime(2024, 10, 19, 7, 30, tzinfo=timezone.utc)


def make_station(index: int, status: StationStatus, **readings) -> Station:
    return Station(
        id=f"station-{index}",
        name=f"Station {index}",
        status=status,
        location=Location(lat=16.0 + index * 0.1, lng=104.0 + index * 0.1),
        last_updated=FIXED_NOW,
        sensors=SensorReadings(**readings),
        device_model="ISMMA2300" if index % 2 else "DQA230.1",
    )


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def five_stations():
    """Statuses [online, online, warning, offline, online] with known readings."""
    statuses = [
        StationStatus.ONLINE,
        StationStatus.ONLINE,
        StationStatus.WARNING,
        StationStatus.OFFLINE,
        StationStatus.ONLINE,
    ]
    et0 = [4.0, 5.0, 3.5, 2.5, 6.0]
    rainfall = [0.0, 10.0, 2.5, 7.5, 5.0]
    water_level = [1.1, 2.2, 3.3, 4.4, 5.5]
    return [
        make_station(i + 1, status, et0=et0[i], rainfall=rainfall[i], water_level=water_level[i])
        for i, status in enumerate(statuses)
    ]


@pytest.fixture
def stations(now):
    return get_stations(now)


@pytest.fixture
def alerts(now):
    return get_alerts(now)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "asyncio_timers: tests that drive real asyncio timers (short sleeps)"
    )
