"""
Dashboard State
- Snapshot aggregates from SensorService / AlertService
- 7-day history generated once per mount
- Clock tick + animation pulse via TimerScope, stopped on unmount
  or when the client stops sending heartbeats (tab closed)
"""
import reflex as rx
import random
import time
from typing import Any, Dict, List, Optional
from reflex.utils import console

from station_monitor import config
from station_monitor.mock.historical_data import generate_historical_data
from station_monitor.mock.stations import get_stations
from station_monitor.services.export_service import export_stations_csv
from station_monitor.services.sensor_service import SensorService
from station_monitor.services.trend_service import build_series, jitter, jitter_series, summarize_series
from station_monitor.utils.formatting import format_value, now_local
from station_monitor.utils.timers import TimerScope

from .base import BaseState, alert_to_row

HISTORY_STATION = "station-1"

# Metrics with no upstream source yet: (base, spread) for the mock readings
WIND_SPEED_MOCK = (3.2, 1.5)
WIND_DIRECTION_MOCK = (172.0, 30.0)
PRESSURE_MOCK = (1013.25, 1.5)
TEMPERATURE_MOCK = (22.0, 5.0)
HUMIDITY_MOCK = (65.0, 15.0)


class DashboardState(BaseState):
    """Dashboard page state"""

    # Tabs
    selected_tab: str = "overview"

    # Aggregates (display strings)
    online_count: int = 0
    station_count: int = 0
    et0_avg: str = "0.00"
    rainfall_avg: str = "0.00"
    water_level_avg: str = "0.00"

    # Mock readings
    wind_speed: str = "0.0"
    wind_direction: str = "0"
    pressure: str = "0.0"
    temperature: str = "0.0"
    humidity: str = "0.0"

    # Chart series {"date", "value"}
    et0_series: List[Dict[str, Any]] = []
    rainfall_series: List[Dict[str, Any]] = []
    water_level_series: List[Dict[str, Any]] = []
    temperature_series: List[Dict[str, Any]] = []
    humidity_series: List[Dict[str, Any]] = []
    wind_series: List[Dict[str, Any]] = []
    wind_direction_series: List[Dict[str, Any]] = []
    pressure_series: List[Dict[str, Any]] = []

    # Timers
    current_time: str = ""
    current_date: str = ""
    animate: bool = False
    timers_active: bool = False
    _timer_generation: int = 0
    _mounted: bool = False
    _last_heartbeat: float = 0.0

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @rx.var(cache=False)
    def recent_alerts(self) -> List[Dict[str, Any]]:
        """Most recent alerts for the summary panel"""
        return [alert_to_row(a) for a in self._alert_service().recent(config.RECENT_ALERT_LIMIT)]

    @rx.var
    def series_summaries(self) -> Dict[str, Dict[str, str]]:
        """Latest / average display strings per chart series"""
        series = {
            "et0": self.et0_series,
            "rainfall": self.rainfall_series,
            "water_level": self.water_level_series,
            "temperature": self.temperature_series,
            "humidity": self.humidity_series,
            "wind_speed": self.wind_series,
            "wind_direction": self.wind_direction_series,
            "pressure": self.pressure_series,
        }
        return {
            name: {k: format_value(v, 2) for k, v in summarize_series(points).items()}
            for name, points in series.items()
        }

    # =========================================================================
    # DATA
    # =========================================================================

    def _load_snapshot(self):
        stations = get_stations()
        service = SensorService(stations)

        self.online_count = service.online_count
        self.station_count = len(stations)
        self.et0_avg = format_value(service.average_et0(), 2)
        self.rainfall_avg = format_value(service.average_rainfall(), 2)
        self.water_level_avg = format_value(service.average_water_level(), 2)
        self._refresh_mock_readings()
        self.update_last_update()

    def _refresh_mock_readings(self):
        self.wind_speed = format_value(jitter(*WIND_SPEED_MOCK), 1)
        self.wind_direction = format_value(jitter(*WIND_DIRECTION_MOCK), 0)
        self.pressure = format_value(jitter(*PRESSURE_MOCK), 1)
        self.temperature = format_value(jitter(*TEMPERATURE_MOCK), 1)
        self.humidity = format_value(jitter(*HUMIDITY_MOCK), 1)

    def _load_history(self):
        history = generate_historical_data(HISTORY_STATION, config.HISTORY_DAYS)
        rng = random.Random()

        self.et0_series = build_series(history, "et0")
        self.rainfall_series = build_series(history, "rainfall")
        self.water_level_series = build_series(history, "water_level")
        self.temperature_series = build_series(history, "temperature")
        self.humidity_series = build_series(history, "humidity")
        self.wind_series = build_series(history, "wind_speed")
        # Not part of the station history: generated around typical values
        self.wind_direction_series = jitter_series(history, 180.0, 90.0, rng)
        self.pressure_series = jitter_series(history, 1013.25, 10.0, rng)

    def _tick_clock(self):
        now = now_local()
        self.current_time = now.strftime("%H:%M:%S")
        self.current_date = now.strftime("%A, %d %B %Y")

    # =========================================================================
    # TIMERS
    # =========================================================================

    def _start_timers(self, now: Optional[float] = None) -> int:
        """Claim the timers for a new mount and return its generation"""
        self._timer_generation += 1
        self._mounted = True
        self._last_heartbeat = time.time() if now is None else now
        self.timers_active = True
        return self._timer_generation

    def _stop_timers(self):
        self._mounted = False
        self.timers_active = False
        self.animate = False

    def _should_stop(self, generation: int, now: Optional[float] = None) -> bool:
        """True once the page unmounted, a newer mount took over, or the client went silent"""
        if not self.timers_active or self._timer_generation != generation:
            return True
        now = time.time() if now is None else now
        return now - self._last_heartbeat > config.CLIENT_HEARTBEAT_TIMEOUT

    def _apply_tick(self, name: str, timers: TimerScope):
        if name == "clock":
            self._tick_clock()
        elif name == "pulse":
            self.animate = True
            self._refresh_mock_readings()
            timers.after(config.PULSE_DURATION, "pulse_end")
        elif name == "pulse_end":
            self.animate = False

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    @rx.event
    def on_mount(self):
        """Load data and start the page timers"""
        console.info("Dashboard mounting...")
        self.error_message = ""
        try:
            self._load_snapshot()
            self._load_history()
        except Exception as e:
            console.error(f"Dashboard load failed: {e}")
            self.error_message = str(e)

        self._tick_clock()
        return DashboardState.run_timers(self._start_timers())

    @rx.event
    def on_unmount(self):
        """Stop the page timers"""
        self._stop_timers()
        console.info("Dashboard unmounted, timers stopping")

    @rx.event
    def heartbeat(self, value: str):
        """Client ping; restarts the timers if they stopped while the tab was idle"""
        self._last_heartbeat = time.time()
        if self._mounted and not self.timers_active:
            console.info("Dashboard client is back, restarting timers")
            return DashboardState.run_timers(self._start_timers())

    @rx.event(background=True)
    async def run_timers(self, generation: int):
        """Clock tick and animation pulse until the page unmounts"""
        console.info(f"Dashboard timers started (generation {generation})")

        async with TimerScope("dashboard") as timers:
            timers.every(config.CLOCK_INTERVAL, "clock")
            timers.every(config.PULSE_INTERVAL, "pulse")

            async for name in timers:
                async with self:
                    if self._should_stop(generation):
                        # Still the current loop: mark it stopped so a heartbeat can restart it
                        if self._timer_generation == generation:
                            self.timers_active = False
                            self.animate = False
                        break
                    self._apply_tick(name, timers)

        console.info(f"Dashboard timers stopped (generation {generation})")

    # =========================================================================
    # EVENTS
    # =========================================================================

    @rx.event
    def set_selected_tab(self, value: str):
        self.selected_tab = value

    @rx.event
    def export_stations(self):
        """Download the current station set as CSV"""
        try:
            filename, data = export_stations_csv(get_stations())
        except Exception as e:
            console.error(f"Export failed: {e}")
            self.error_message = f"Export failed: {e}"
            return
        return rx.download(data=data, filename=filename)
