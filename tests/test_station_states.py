"""
Tests for the station list and station detail load handlers.

The handler functions run against plain objects carrying the state fields.
"""

import pytest

from station_monitor import config
from station_monitor.states.common import stations_state
from station_monitor.states.common.stations_state import StationDetailState, StationsState

STALE_ERROR = "Map could not be rendered"


class StationList:
    def __init__(self):
        self.error_message = STALE_ERROR
        self.last_update = ""
        self.stations = []

    def update_last_update(self):
        self.last_update = "updated"


class StationDetail:
    _clear = StationDetailState._clear

    def __init__(self, station_id):
        self.station_id = station_id
        self.error_message = STALE_ERROR
        self.last_update = ""
        self.found = False
        self.station = {}
        self.et0_series = []
        self.rainfall_series = []
        self.water_level_series = []
        self.summaries = {}
        self.log_rows = []

    def _route_station_id(self):
        return self.station_id

    def update_last_update(self):
        self.last_update = "updated"


def broken_collaborator(*args, **kwargs):
    raise ConnectionError("station feed unavailable")


@pytest.mark.unit
class TestStationListLoad:

    def test_success_clears_previous_error(self):
        state = StationList()
        StationsState.load.fn(state)

        assert state.error_message == ""
        assert len(state.stations) == 8
        assert state.last_update == "updated"

    def test_failure_is_surfaced(self, monkeypatch):
        monkeypatch.setattr(stations_state, "get_stations", broken_collaborator)
        state = StationList()

        StationsState.load.fn(state)

        assert state.error_message == "station feed unavailable"
        assert state.stations == []


@pytest.mark.unit
class TestStationDetailLoad:

    def test_known_station(self):
        state = StationDetail("station-2")
        StationDetailState.load.fn(state)

        assert state.error_message == ""
        assert state.found is True
        assert state.station["id"] == "station-2"
        assert len(state.et0_series) == config.HISTORY_DAYS
        assert len(state.log_rows) == config.HISTORY_DAYS
        assert state.log_rows[0]["date"] > state.log_rows[-1]["date"]
        assert set(state.summaries) == {"et0", "rainfall", "water_level"}

    def test_unknown_station_is_not_an_error(self):
        state = StationDetail("station-99")
        StationDetailState.load.fn(state)

        assert state.found is False
        assert state.error_message == ""
        assert state.station == {"id": "station-99"}
        assert state.log_rows == []

    def test_failure_is_surfaced(self, monkeypatch):
        monkeypatch.setattr(stations_state, "get_stations", broken_collaborator)
        state = StationDetail("station-2")
        state.found = True
        state.log_rows = [{"date": "2024-10-18"}]

        StationDetailState.load.fn(state)

        assert state.error_message == "station feed unavailable"
        assert state.found is False
        assert state.station == {"id": "station-2"}
        assert state.log_rows == []
