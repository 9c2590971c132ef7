import reflex as rx
from typing import Dict

from .status_badge import category_badge


def alert_row(alert: Dict) -> rx.Component:
    """Compact alert line for the dashboard panel"""
    return rx.el.div(
        rx.el.div(
            rx.el.span(alert["station_name"], class_name="text-sm font-medium truncate max-w-[180px]"),
            category_badge(alert["category"]),
            class_name="flex items-center justify-between",
        ),
        rx.el.span(alert["message"], class_name="text-xs text-gray-500"),
        class_name="px-4 py-2 flex flex-col gap-1 border-t border-amber-200/30",
    )


def alert_panel(alerts: rx.Var, pending_count: rx.Var) -> rx.Component:
    """Pending count, most recent alerts and a link to the alerts page"""
    return rx.el.div(
        rx.el.div(
            rx.el.h3("Alerts", class_name="text-sm font-semibold mb-1 text-amber-700"),
            class_name="p-4",
        ),
        rx.el.div(
            rx.el.span("Pending", class_name="text-sm font-medium"),
            rx.badge(pending_count, color_scheme="amber", variant="outline"),
            class_name="px-4 py-2 flex items-center justify-between border-t border-amber-200/30",
        ),
        rx.cond(
            alerts.length() > 0,
            rx.foreach(alerts, alert_row),
            rx.el.div(
                rx.text("No alerts", class_name="text-xs text-gray-400"),
                class_name="px-4 py-3 border-t border-amber-200/30",
            ),
        ),
        rx.el.div(
            rx.link(
                rx.button(
                    "View all alerts",
                    variant="outline",
                    size="1",
                    color_scheme="amber",
                    width="100%",
                ),
                href="/alerts",
                width="100%",
            ),
            class_name="p-3 bg-amber-50/30 border-t border-amber-200/30",
        ),
        class_name="bg-gradient-to-br from-amber-500/10 to-amber-600/5 rounded-xl border border-amber-200 overflow-hidden",
    )
