"""
Station States - list, details and sensor logs pages
- Details/logs read the station id from the dynamic route
- Unknown ids render a "not found" message instead of failing
"""
import reflex as rx
from typing import Any, Dict, List
from reflex.utils import console

from station_monitor import config
from station_monitor.mock.historical_data import generate_historical_data
from station_monitor.mock.stations import get_stations
from station_monitor.models import Station, status_style
from station_monitor.services.sensor_service import SensorService
from station_monitor.services.trend_service import build_series, summarize_series
from station_monitor.utils.formatting import format_timestamp, format_value

from .base import BaseState


def station_to_row(station: Station) -> Dict[str, Any]:
    """Station model -> JSON-safe dict for UI vars"""
    sensors = station.sensors
    return {
        "id": station.id,
        "name": station.name,
        "status": station.status.value,
        "status_color": status_style(station.status).marker_color,
        "device_model": station.device_model or "",
        "lat": format_value(station.location.lat, 4),
        "lng": format_value(station.location.lng, 4),
        "last_updated": format_timestamp(station.last_updated),
        "temperature": format_value(sensors.temperature, 1),
        "humidity": format_value(sensors.humidity, 1),
        "wind_speed": format_value(sensors.wind_speed, 1),
        "solar_radiation": format_value(sensors.solar_radiation, 0),
        "et0": format_value(sensors.et0, 2),
        "rainfall": format_value(sensors.rainfall, 2),
        "water_level": format_value(sensors.water_level, 2),
    }


class StationsState(BaseState):
    """Station list page"""

    stations: List[Dict[str, Any]] = []
    search: str = ""

    @rx.var
    def filtered_stations(self) -> List[Dict[str, Any]]:
        term = self.search.strip().lower()
        if not term:
            return self.stations
        return [s for s in self.stations if term in s["name"].lower() or term in s["id"].lower()]

    @rx.event
    def load(self):
        self.error_message = ""
        try:
            self.stations = [station_to_row(s) for s in get_stations()]
            self.update_last_update()
        except Exception as e:
            console.error(f"Station list load failed: {e}")
            self.error_message = str(e)

    @rx.event
    def set_search(self, value: str):
        self.search = value


class StationDetailState(BaseState):
    """Station details and sensor log pages"""

    found: bool = False
    station: Dict[str, Any] = {}
    et0_series: List[Dict[str, Any]] = []
    rainfall_series: List[Dict[str, Any]] = []
    water_level_series: List[Dict[str, Any]] = []
    summaries: Dict[str, Dict[str, str]] = {}
    log_rows: List[Dict[str, Any]] = []

    def _route_station_id(self) -> str:
        return self.router.page.params.get("station_id", "")

    @rx.event
    def load(self):
        station_id = self._route_station_id()
        self.error_message = ""
        try:
            station = SensorService(get_stations()).get_station(station_id)
            self.found = station is not None
            if station is None:
                self._clear(station_id)
                return

            history = generate_historical_data(station.id, config.HISTORY_DAYS)
            self.station = station_to_row(station)
            self.et0_series = build_series(history, "et0")
            self.rainfall_series = build_series(history, "rainfall")
            self.water_level_series = build_series(history, "water_level")
            self.summaries = {
                name: {k: format_value(v, 2) for k, v in summarize_series(series).items()}
                for name, series in (
                    ("et0", self.et0_series),
                    ("rainfall", self.rainfall_series),
                    ("water_level", self.water_level_series),
                )
            }
            self.log_rows = [
                {
                    "date": point.date.isoformat(),
                    "et0": format_value(point.et0, 2),
                    "rainfall": format_value(point.rainfall, 2),
                    "water_level": format_value(point.water_level, 2),
                    "temperature": format_value(point.temperature, 1),
                    "humidity": format_value(point.humidity, 1),
                    "wind_speed": format_value(point.wind_speed, 1),
                    "solar_radiation": format_value(point.solar_radiation, 0),
                }
                for point in reversed(history)
            ]
            self.update_last_update()
            console.info(f"Loaded station {station.id} with {len(history)} days of history")
        except Exception as e:
            console.error(f"Station {station_id} load failed: {e}")
            self.error_message = str(e)
            self.found = False
            self._clear(station_id)

    def _clear(self, station_id: str):
        self.station = {"id": station_id}
        self.et0_series = []
        self.rainfall_series = []
        self.water_level_series = []
        self.summaries = {}
        self.log_rows = []
