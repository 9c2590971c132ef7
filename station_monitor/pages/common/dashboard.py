"""
Dashboard Page
- Overview tab: stat cards, ET0 7-day trend, alert panel
- Trends tab: weather and water history charts
"""
import reflex as rx

from station_monitor import config

from ...components.alert_feed import alert_panel
from ...components.layout import shell
from ...components.stat_card import stat_card
from ...components.trend_chart import trend_chart
from ...states.common.dashboard_state import DashboardState as D


def page_header() -> rx.Component:
    """Title, live clock and export button"""
    return rx.hstack(
        rx.vstack(
            rx.heading("Dashboard", size="6"),
            rx.hstack(
                rx.text(D.current_date, size="2", color="gray"),
                rx.text(D.current_time, size="2", weight="bold", style={"font-family": "monospace"}),
                spacing="2",
            ),
            spacing="1",
            align="start",
        ),
        rx.spacer(),
        rx.button(
            rx.icon("download", size=16),
            "Export",
            variant="outline",
            on_click=D.export_stations,
        ),
        width="100%",
        align="center",
    )


def stat_grid() -> rx.Component:
    return rx.grid(
        stat_card(
            "Online Stations",
            D.online_count,
            "radio-tower",
            color="#22c55e",
            secondary_label="Total",
            secondary_value=D.station_count,
            description="Stations reporting",
        ),
        stat_card(
            "ET0 Today",
            D.et0_avg,
            "sun",
            color="#f59e0b",
            unit="mm",
            description="Average across stations",
        ),
        stat_card(
            "Rainfall",
            D.rainfall_avg,
            "cloud-rain",
            color="#3b82f6",
            unit="mm",
            description="Average across stations",
        ),
        stat_card(
            "Water Level",
            D.water_level_avg,
            "waves",
            color="#0ea5e9",
            unit="m",
            description="Average across stations",
        ),
        stat_card(
            "Wind",
            D.wind_speed,
            "wind",
            color="#64748b",
            unit="m/s",
            secondary_label="Direction",
            secondary_value=D.wind_direction,
            secondary_unit="°",
            highlight=D.animate,
        ),
        stat_card(
            "Pressure",
            D.pressure,
            "gauge",
            color="#8b5cf6",
            unit="hPa",
            highlight=D.animate,
        ),
        stat_card(
            "Temperature",
            D.temperature,
            "thermometer",
            color="#ef4444",
            unit="°C",
            highlight=D.animate,
        ),
        stat_card(
            "Humidity",
            D.humidity,
            "droplet",
            color="#06b6d4",
            unit="%",
            highlight=D.animate,
        ),
        columns=rx.breakpoints(initial="1", sm="2", lg="4"),
        spacing="4",
        width="100%",
    )


def overview_tab() -> rx.Component:
    return rx.vstack(
        stat_grid(),
        rx.grid(
            rx.box(
                trend_chart(
                    D.et0_series,
                    chart_id="et0-overview",
                    color="#f59e0b",
                    unit="mm",
                    height=260,
                    title="ET0 - last 7 days",
                    icon="sun",
                    latest=D.series_summaries["et0"]["latest"],
                    average=D.series_summaries["et0"]["average"],
                ),
                class_name="lg:col-span-2",
            ),
            alert_panel(D.recent_alerts, D.pending_alert_count),
            columns=rx.breakpoints(initial="1", lg="3"),
            spacing="4",
            width="100%",
        ),
        spacing="4",
        width="100%",
    )


def _chart_card(data, key: str, title: str, color: str, unit: str, icon: str) -> rx.Component:
    summary = D.series_summaries[key]
    return trend_chart(
        data,
        chart_id=key.replace("_", "-"),
        color=color,
        unit=unit,
        height=220,
        title=title,
        icon=icon,
        latest=summary["latest"],
        average=summary["average"],
    )


def trends_tab() -> rx.Component:
    return rx.grid(
        _chart_card(D.temperature_series, "temperature", "Temperature", "#ef4444", "°C", "thermometer"),
        _chart_card(D.humidity_series, "humidity", "Humidity", "#06b6d4", "%", "droplet"),
        _chart_card(D.wind_series, "wind_speed", "Wind Speed", "#64748b", "m/s", "wind"),
        _chart_card(D.wind_direction_series, "wind_direction", "Wind Direction", "#94a3b8", "°", "compass"),
        _chart_card(D.pressure_series, "pressure", "Pressure", "#8b5cf6", "hPa", "gauge"),
        _chart_card(D.rainfall_series, "rainfall", "Rainfall", "#3b82f6", "mm", "cloud-rain"),
        _chart_card(D.water_level_series, "water_level", "Water Level", "#0ea5e9", "m", "waves"),
        columns=rx.breakpoints(initial="1", lg="2"),
        spacing="4",
        width="100%",
    )


def dashboard_page() -> rx.Component:
    """Main dashboard"""
    return shell(
        rx.vstack(
            page_header(),

            # Error message
            rx.cond(
                D.error_message != "",
                rx.callout(D.error_message, icon="triangle-alert", color_scheme="red"),
                rx.box(),
            ),

            rx.tabs.root(
                rx.tabs.list(
                    rx.tabs.trigger("Overview", value="overview"),
                    rx.tabs.trigger("Trends", value="trends"),
                ),
                rx.tabs.content(overview_tab(), value="overview", class_name="pt-4"),
                rx.tabs.content(trends_tab(), value="trends", class_name="pt-4"),
                value=D.selected_tab,
                on_change=D.set_selected_tab,
                width="100%",
            ),

            rx.text(f"Last update: {D.last_update}", size="1", color="gray"),
            # Liveness ping for the timer loop
            rx.moment(
                interval=int(config.CLIENT_HEARTBEAT_INTERVAL * 1000),
                on_change=D.heartbeat,
                display="none",
            ),
            spacing="4",
            width="100%",
            padding="4",
        ),
        on_mount=D.on_mount,
        on_unmount=D.on_unmount,
        active_route="/dashboard",
    )
