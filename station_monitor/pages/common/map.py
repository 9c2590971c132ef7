"""Station Map Page - status legend + folium map document"""
import reflex as rx

from ... import config
from ...components.layout import shell
from ...models import StationStatus, status_style
from ...services.map_service import GROUP_COLORS
from ...states.common.map_state import MapState


def legend_item(status: StationStatus) -> rx.Component:
    style = status_style(status)
    return rx.hstack(
        rx.el.span(
            class_name="station-legend-dot" + (" pulse" if style.pulse else ""),
            style={"background_color": style.marker_color},
        ),
        rx.text(style.label, size="2"),
        rx.badge(MapState.status_counts[status.value], variant="soft", color_scheme=style.color_scheme),
        spacing="2",
        align="center",
    )


def group_legend_item(group: str) -> rx.Component:
    return rx.hstack(
        rx.el.span(
            class_name="w-6 border-t-2 border-dashed",
            style={"border_color": GROUP_COLORS[group]},
        ),
        rx.text(f"{group.capitalize()} stations", size="2"),
        spacing="2",
        align="center",
    )


def map_legend() -> rx.Component:
    return rx.card(
        rx.vstack(
            rx.text("Legend", size="2", weight="bold"),
            *[legend_item(s) for s in StationStatus],
            rx.divider(),
            *[group_legend_item(g) for g in GROUP_COLORS],
            spacing="2",
            align="start",
        ),
        class_name="station-map-legend",
    )


def map_page() -> rx.Component:
    """Station locations with status markers"""
    return shell(
        rx.vstack(
            rx.hstack(
                rx.heading("Station Map", size="6"),
                rx.spacer(),
                rx.text(MapState.station_count, " stations", size="2", color="gray"),
                width="100%",
                align="center",
            ),

            rx.cond(
                MapState.error_message != "",
                rx.callout(MapState.error_message, icon="triangle-alert", color_scheme="red"),
                rx.box(),
            ),

            rx.flex(
                rx.box(
                    rx.cond(
                        MapState.loading,
                        rx.center(rx.spinner(size="3"), height=f"{config.MAP_HEIGHT}px"),
                        rx.el.iframe(
                            src_doc=MapState.map_html,
                            class_name="station-map-frame",
                            width="100%",
                            height=f"{config.MAP_HEIGHT}px",
                        ),
                    ),
                    flex="1",
                    width="100%",
                ),
                map_legend(),
                direction=rx.breakpoints(initial="column", lg="row"),
                gap="4",
                width="100%",
            ),

            rx.text(f"Last update: {MapState.last_update}", size="1", color="gray"),
            spacing="4",
            width="100%",
            padding="4",
        ),
        on_mount=MapState.on_mount,
        on_unmount=MapState.on_unmount,
        active_route="/stations/map",
    )
