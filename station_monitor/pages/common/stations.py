"""
Station Pages
- List: table of all stations with status badges
- Details: sensor bundle + 7-day ET0 / rainfall / water level charts
- Sensor logs: generated daily history, newest first
"""
import reflex as rx
from typing import Dict

from ...components.layout import shell
from ...components.status_badge import status_badge
from ...components.trend_chart import trend_chart
from ...states.common.stations_state import StationDetailState as S
from ...states.common.stations_state import StationsState


# =============================================================================
# LIST
# =============================================================================

def station_row(station: Dict) -> rx.Component:
    return rx.table.row(
        rx.table.cell(rx.text(station["id"], size="2", color="gray")),
        rx.table.cell(rx.text(station["name"], weight="medium")),
        rx.table.cell(status_badge(station["status"])),
        rx.table.cell(station["device_model"]),
        rx.table.cell(station["lat"], ", ", station["lng"]),
        rx.table.cell(station["last_updated"]),
        rx.table.cell(
            rx.hstack(
                rx.link(rx.button("Details", size="1", variant="soft"),
                        href=f"/stations/details/{station['id']}"),
                rx.link(rx.button("Logs", size="1", variant="outline"),
                        href=f"/stations/sensor-logs/{station['id']}"),
                spacing="2",
            ),
        ),
    )


def station_list_page() -> rx.Component:
    """All stations"""
    return shell(
        rx.vstack(
            rx.hstack(
                rx.heading("Station List", size="6"),
                rx.spacer(),
                rx.input(
                    placeholder="Search stations...",
                    value=StationsState.search,
                    on_change=StationsState.set_search,
                    width="240px",
                ),
                width="100%",
                align="center",
            ),

            rx.cond(
                StationsState.error_message != "",
                rx.callout(StationsState.error_message, icon="triangle-alert", color_scheme="red"),
                rx.box(),
            ),

            rx.table.root(
                rx.table.header(
                    rx.table.row(
                        rx.table.column_header_cell("ID"),
                        rx.table.column_header_cell("Name"),
                        rx.table.column_header_cell("Status"),
                        rx.table.column_header_cell("Device"),
                        rx.table.column_header_cell("Location"),
                        rx.table.column_header_cell("Last update"),
                        rx.table.column_header_cell(""),
                    ),
                ),
                rx.table.body(rx.foreach(StationsState.filtered_stations, station_row)),
                variant="surface",
                width="100%",
            ),

            spacing="4",
            width="100%",
            padding="4",
        ),
        active_route="/stations/list",
    )


# =============================================================================
# DETAILS
# =============================================================================

def not_found() -> rx.Component:
    return rx.center(
        rx.vstack(
            rx.icon("search-x", size=32, color="var(--gray-9)"),
            rx.text("Station not found: ", S.station["id"], size="3", color="gray"),
            rx.cond(
                S.error_message != "",
                rx.callout(S.error_message, icon="triangle-alert", color_scheme="red"),
                rx.box(),
            ),
            rx.link("Back to station list", href="/stations/list"),
            align="center",
            spacing="2",
        ),
        padding="8",
        width="100%",
    )


def reading(label: str, key: str, unit: str) -> rx.Component:
    return rx.box(
        rx.text(label, size="1", color="gray"),
        rx.hstack(
            rx.text(S.station[key], size="4", weight="bold"),
            rx.text(unit, size="1", color="gray"),
            spacing="1",
            align="baseline",
        ),
        class_name="rounded-lg border border-gray-200 bg-white p-3",
    )


def station_title(subtitle: str) -> rx.Component:
    return rx.hstack(
        rx.vstack(
            rx.heading(S.station["name"], size="6"),
            rx.text(subtitle, " · ", S.station["device_model"], size="2", color="gray"),
            spacing="1",
            align="start",
        ),
        status_badge(S.station["status"]),
        rx.spacer(),
        rx.text("Updated ", S.station["last_updated"], size="1", color="gray"),
        width="100%",
        align="center",
    )


def _history_chart(data, key: str, title: str, color: str, unit: str, icon: str) -> rx.Component:
    return trend_chart(
        data,
        chart_id=f"detail-{key.replace('_', '-')}",
        color=color,
        unit=unit,
        height=220,
        title=title,
        icon=icon,
        latest=S.summaries[key]["latest"],
        average=S.summaries[key]["average"],
    )


def station_details_page() -> rx.Component:
    """Sensor readings and 7-day history for one station"""
    return shell(
        rx.cond(
            S.found,
            rx.vstack(
                station_title("Station details"),
                rx.grid(
                    reading("Temperature", "temperature", "°C"),
                    reading("Humidity", "humidity", "%"),
                    reading("Wind speed", "wind_speed", "m/s"),
                    reading("Solar radiation", "solar_radiation", "W/m²"),
                    reading("ET0", "et0", "mm"),
                    reading("Rainfall", "rainfall", "mm"),
                    reading("Water level", "water_level", "m"),
                    columns=rx.breakpoints(initial="2", md="4", lg="7"),
                    spacing="3",
                    width="100%",
                ),
                rx.grid(
                    _history_chart(S.et0_series, "et0", "ET0", "#f59e0b", "mm", "sun"),
                    _history_chart(S.rainfall_series, "rainfall", "Rainfall", "#3b82f6", "mm", "cloud-rain"),
                    _history_chart(S.water_level_series, "water_level", "Water Level", "#0ea5e9", "m", "waves"),
                    columns=rx.breakpoints(initial="1", lg="3"),
                    spacing="4",
                    width="100%",
                ),
                rx.link(
                    rx.button(rx.icon("list", size=16), "Sensor logs", variant="outline"),
                    href=f"/stations/sensor-logs/{S.station['id']}",
                ),
                spacing="4",
                width="100%",
                padding="4",
            ),
            not_found(),
        ),
        active_route="/stations/list",
    )


# =============================================================================
# SENSOR LOGS
# =============================================================================

LOG_COLUMNS = [
    ("Date", "date"),
    ("ET0 (mm)", "et0"),
    ("Rainfall (mm)", "rainfall"),
    ("Water level (m)", "water_level"),
    ("Temp (°C)", "temperature"),
    ("Humidity (%)", "humidity"),
    ("Wind (m/s)", "wind_speed"),
    ("Solar (W/m²)", "solar_radiation"),
]


def log_row(row: Dict) -> rx.Component:
    return rx.table.row(*[rx.table.cell(row[key]) for _, key in LOG_COLUMNS])


def sensor_logs_page() -> rx.Component:
    """Daily sensor history table for one station"""
    return shell(
        rx.cond(
            S.found,
            rx.vstack(
                station_title("Sensor logs"),
                rx.table.root(
                    rx.table.header(
                        rx.table.row(*[rx.table.column_header_cell(label) for label, _ in LOG_COLUMNS]),
                    ),
                    rx.table.body(rx.foreach(S.log_rows, log_row)),
                    variant="surface",
                    width="100%",
                ),
                rx.link(
                    rx.button(rx.icon("chart-line", size=16), "Station details", variant="outline"),
                    href=f"/stations/details/{S.station['id']}",
                ),
                spacing="4",
                width="100%",
                padding="4",
            ),
            not_found(),
        ),
        active_route="/stations/list",
    )
