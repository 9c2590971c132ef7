"""
Alerts Page
- All alerts, most recent first
- Hide acknowledged filter
- Per-session acknowledge
"""
import reflex as rx
from typing import Dict

from ...components.layout import shell
from ...components.status_badge import category_badge
from ...models import AlertCategory, category_style
from ...states.common.alerts_state import AlertsState


def stat_tile(title: str, value: rx.Var, color: str = "blue") -> rx.Component:
    """Statistics tile"""
    return rx.box(
        rx.vstack(
            rx.text(title, size="2", color="gray"),
            rx.text(value, size="6", weight="bold"),
            spacing="1",
            align="center",
        ),
        padding="4",
        border_radius="lg",
        bg=rx.color(color, 2),
        width="100%",
    )


def alert_card(alert: Dict) -> rx.Component:
    return rx.box(
        rx.vstack(
            rx.hstack(
                category_badge(alert["category"]),
                rx.text(alert["station_name"], size="2", weight="medium"),
                rx.spacer(),
                rx.text(alert["time"], size="2", color="gray"),
                width="100%",
                align="center",
            ),
            rx.text(alert["message"], size="3"),
            rx.cond(
                alert["acknowledged"],
                rx.badge("✓ Acknowledged", variant="soft", color_scheme="green"),
                rx.button(
                    "Acknowledge",
                    size="1",
                    variant="soft",
                    on_click=lambda: AlertsState.acknowledge_alert(alert["id"]),
                ),
            ),
            spacing="2",
            align="start",
            width="100%",
        ),
        padding="4",
        border=f"1px solid {rx.color('gray', 3)}",
        border_radius="lg",
        width="100%",
        _hover={"bg": rx.color("gray", 1)},
    )


def alerts_page() -> rx.Component:
    """Alert list"""
    return shell(
        rx.vstack(
            rx.hstack(
                rx.heading("Alerts", size="6"),
                rx.spacer(),
                rx.button(
                    "Acknowledge all",
                    variant="outline",
                    on_click=AlertsState.acknowledge_all,
                    disabled=AlertsState.pending_alert_count == 0,
                ),
                width="100%",
            ),

            rx.hstack(
                stat_tile("Total", AlertsState.total_count, "gray"),
                stat_tile("Pending", AlertsState.pending_alert_count, "orange"),
                *[
                    stat_tile(c.value.capitalize(), AlertsState.category_counts[c.value], category_style(c).color_scheme)
                    for c in AlertCategory
                ],
                spacing="3",
                width="100%",
            ),

            rx.hstack(
                rx.spacer(),
                rx.switch(
                    checked=AlertsState.show_acknowledged,
                    on_change=AlertsState.toggle_show_acknowledged,
                ),
                rx.text("Show acknowledged", size="2"),
                width="100%",
                align="center",
            ),

            rx.cond(
                AlertsState.filtered_alerts.length() > 0,
                rx.vstack(
                    rx.foreach(AlertsState.filtered_alerts, alert_card),
                    spacing="2",
                    width="100%",
                ),
                rx.center(
                    rx.text("No alerts found", color="gray", size="3"),
                    padding="8",
                ),
            ),

            spacing="4",
            width="100%",
            padding="4",
        ),
        active_route="/alerts",
    )
