import reflex as rx

# Import BaseState for sidebar toggle and alert bell (shared across all pages)
from ..states.common.base import BaseState as B
from .. import config

MENU = [
    {"icon": "home", "name": "Dashboard", "path": "/dashboard"},
    {"icon": "map", "name": "Station Map", "path": "/stations/map"},
    {"icon": "bar-chart-3", "name": "Station List", "path": "/stations/list"},
    {"icon": "triangle-alert", "name": "Alerts", "path": "/alerts"},
]


def _is_active(active: str, path: str) -> bool:
    return active == path or active.startswith(f"{path}/")


def collapsed_sidebar() -> rx.Component:
    """Collapsed sidebar (icons only)"""
    return rx.box(
        rx.flex(
            rx.button(
                rx.icon("panel-left-open", size=20),
                variant="ghost",
                size="2",
                class_name="hover:bg-gray-100 rounded-lg p-2",
                on_click=B.toggle_sidebar,
            ),
            direction="column",
            align="center",
            class_name="pb-4 border-b border-gray-200",
        ),
        rx.vstack(
            *[
                rx.link(
                    rx.button(
                        rx.icon(menu["icon"], size=18),
                        variant="ghost",
                        size="3",
                        class_name="w-full hover:bg-blue-50",
                    ),
                    href=menu["path"],
                )
                for menu in MENU
            ],
            spacing="2",
            align="stretch",
            class_name="pt-4",
        ),
        width="64px",
        flex_shrink="0",
        class_name="hidden md:flex flex-col border-r border-gray-200 bg-white shadow-lg sticky top-16 h-[calc(100vh-4rem)] p-2",
    )


def sidebar(active: str = "/dashboard") -> rx.Component:
    return rx.box(
        rx.flex(
            rx.button(
                rx.icon("panel-left-close", size=20),
                variant="ghost",
                size="2",
                class_name="hover:bg-gray-100 rounded-lg p-2",
                on_click=B.toggle_sidebar,
            ),
            justify="end",
            width="100%",
            class_name="pb-3 border-b border-gray-200",
        ),
        rx.vstack(
            *[
                rx.link(
                    rx.flex(
                        rx.icon(
                            menu["icon"],
                            size=18,
                            color=("var(--blue-11)" if _is_active(active, menu["path"]) else "var(--gray-10)"),
                        ),
                        rx.text(
                            menu["name"],
                            size="2",
                            weight=("bold" if _is_active(active, menu["path"]) else "medium"),
                        ),
                        align="center",
                        gap="2",
                    ),
                    href=menu["path"],
                    underline="none",
                    class_name=(
                        "w-full p-2.5 rounded-lg bg-blue-50 text-blue-700"
                        if _is_active(active, menu["path"])
                        else "w-full p-2.5 rounded-lg text-gray-600 transition-all duration-150 hover:bg-blue-50/50 hover:text-gray-900"
                    ),
                )
                for menu in MENU
            ],
            spacing="1",
            align="stretch",
            class_name="pt-4",
        ),
        rx.spacer(),
        rx.box(
            rx.text("Irrigation Department", class_name="mb-2 text-xs font-medium text-gray-900"),
            rx.text("Sensor Management System", class_name="text-xs text-gray-500"),
            rx.text(f"v{config.APP_VERSION}", class_name="mt-3 text-[11px] text-gray-400"),
            class_name="rounded-lg bg-white border border-gray-200 p-4 shadow-sm",
        ),
        width="240px",
        flex_shrink="0",
        class_name="hidden md:flex flex-col border-r border-gray-200 bg-white shadow-lg sticky top-16 h-[calc(100vh-4rem)] p-3",
    )


def header() -> rx.Component:
    return rx.el.header(
        rx.flex(
            rx.link(
                rx.flex(
                    rx.center(
                        rx.icon("droplets", size=20, color="var(--blue-11)"),
                        class_name="h-9 w-9 bg-blue-50 rounded-full",
                    ),
                    rx.text("Monitoring System", class_name="text-base font-bold text-blue-700 hidden sm:inline-block"),
                    align="center",
                    gap="2",
                ),
                href="/dashboard",
                underline="none",
            ),
            rx.link(
                rx.box(
                    rx.icon("bell", size=20),
                    rx.cond(
                        B.pending_alert_count > 0,
                        rx.badge(
                            B.pending_alert_count,
                            radius="full",
                            variant="solid",
                            class_name="absolute -right-2 -top-2",
                        ),
                        rx.fragment(),
                    ),
                    class_name="relative p-2 rounded-lg hover:bg-blue-50",
                ),
                href="/alerts",
                title="Alerts",
            ),
            justify="between",
            align="center",
            class_name="h-16 px-4",
        ),
        class_name="w-full border-b border-gray-200 bg-white/95 backdrop-blur-sm sticky top-0 z-50",
    )


def shell(*children: rx.Component, on_mount=None, on_unmount=None, active_route: str = "/dashboard") -> rx.Component:
    lifecycle = {}
    if on_mount is not None:
        lifecycle["on_mount"] = on_mount
    if on_unmount is not None:
        lifecycle["on_unmount"] = on_unmount

    return rx.el.div(
        header(),
        rx.el.div(
            rx.cond(
                B.sidebar_collapsed,
                collapsed_sidebar(),
                sidebar(active_route)
            ),
            rx.el.main(
                rx.el.div(
                    *children,
                    class_name="mx-auto max-w-[1600px]",
                ),
                class_name="flex-1 px-2 sm:px-4 py-3 max-w-full overflow-x-hidden",
            ),
            class_name="flex flex-1",
        ),
        class_name="w-full min-h-screen bg-gray-50 flex flex-col",
        **lifecycle,
    )
