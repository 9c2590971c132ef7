"""
Tests for the sensor aggregation service.
"""

import pytest

from station_monitor.models import StationStatus
from station_monitor.services.sensor_service import SensorService
from station_monitor.utils.formatting import format_value


@pytest.mark.unit
class TestSensorService:
    """Online count and metric averages."""

    def test_online_count(self, five_stations):
        assert SensorService(five_stations).online_count == 3

    def test_average_is_sum_over_five(self, five_stations):
        service = SensorService(five_stations)

        assert service.average_et0() == pytest.approx((4.0 + 5.0 + 3.5 + 2.5 + 6.0) / 5)
        assert service.average_rainfall() == pytest.approx((0.0 + 10.0 + 2.5 + 7.5 + 5.0) / 5)
        assert service.average_water_level() == pytest.approx((1.1 + 2.2 + 3.3 + 4.4 + 5.5) / 5)

    def test_average_displayed_with_two_decimals(self, five_stations):
        service = SensorService(five_stations)
        assert format_value(service.average_et0(), 2) == "4.20"
        assert format_value(service.average_water_level(), 2) == "3.30"

    def test_empty_station_set(self):
        service = SensorService([])

        assert service.online_count == 0
        assert service.average_et0() == 0.0
        assert service.average_rainfall() == 0.0
        assert service.average_water_level() == 0.0

    def test_unknown_metric_raises(self, five_stations):
        with pytest.raises(ValueError):
            SensorService(five_stations).average("pressure")

    def test_status_counts_cover_every_status(self, five_stations):
        counts = SensorService(five_stations).status_counts()

        assert set(counts) == {s.value for s in StationStatus}
        assert counts == {"online": 3, "warning": 1, "offline": 1, "critical": 0}

    def test_get_station(self, five_stations):
        service = SensorService(five_stations)

        assert service.get_station("station-3").status == StationStatus.WARNING
        assert service.get_station("station-99") is None

    def test_accepts_any_iterable(self, five_stations):
        service = SensorService(iter(five_stations))
        assert len(service.stations) == 5
        assert service.online_count == 3

    def test_mock_station_set(self, stations):
        service = SensorService(stations)
        assert len(stations) == 8
        assert service.online_count == 4
