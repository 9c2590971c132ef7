"""
Irrigation Station Monitoring Application
Dashboard, station map, alerts and per-station details over mock station data
"""

import reflex as rx
from reflex.utils import console

from . import config
from .utils.logger import setup_logging

# ============================================================================
# PAGES
# ============================================================================
from .pages.common.dashboard import dashboard_page
from .pages.common.map import map_page
from .pages.common.alerts import alerts_page
from .pages.common.stations import station_list_page, station_details_page, sensor_logs_page

# ============================================================================
# STATES
# ============================================================================
from .states.common.stations_state import StationsState, StationDetailState

setup_logging(config.LOG_DIR, config.LOG_LEVEL)

# ============================================================================
# APP CONFIGURATION
# ============================================================================
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="medium",
        accent_color="blue",
    ),
)

# ============================================================================
# PAGE REGISTRATION
# ============================================================================
app.add_page(
    dashboard_page,
    route="/",
    title="Dashboard - Station Monitor",
)

app.add_page(
    dashboard_page,
    route="/dashboard",
    title="Dashboard - Station Monitor",
)

app.add_page(
    map_page,
    route="/stations/map",
    title="Station Map - Station Monitor",
)

app.add_page(
    alerts_page,
    route="/alerts",
    title="Alerts - Station Monitor",
)

app.add_page(
    station_list_page,
    route="/stations/list",
    title="Stations - Station Monitor",
    on_load=StationsState.load,
)

app.add_page(
    station_details_page,
    route="/stations/details/[station_id]",
    title="Station Details - Station Monitor",
    on_load=StationDetailState.load,
)

app.add_page(
    sensor_logs_page,
    route="/stations/sensor-logs/[station_id]",
    title="Sensor Logs - Station Monitor",
    on_load=StationDetailState.load,
)

console.log(f"✅ Station Monitor v{config.APP_VERSION}: 7 routes registered")
