"""Closed status/category enums and their display attributes.

Every enum member must have a style entry; the module refuses to import
otherwise so a new status cannot silently fall through to a default.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "StationStatus",
    "AlertCategory",
    "StatusStyle",
    "CategoryStyle",
    "STATUS_STYLES",
    "CATEGORY_STYLES",
    "status_style",
    "category_style",
]


class StationStatus(str, Enum):
    ONLINE = "online"
    WARNING = "warning"
    OFFLINE = "offline"
    CRITICAL = "critical"


class AlertCategory(str, Enum):
    OFFLINE = "offline"
    WEATHER = "weather"
    OTHER = "other"


@dataclass(frozen=True)
class StatusStyle:
    label: str
    marker_color: str   # hex, used for map markers and legend dots
    color_scheme: str   # Radix color scheme for badges
    badge_color: str    # hex, popup status badge background
    pulse: bool = False


@dataclass(frozen=True)
class CategoryStyle:
    color_scheme: str


STATUS_STYLES: dict[StationStatus, StatusStyle] = {
    StationStatus.ONLINE: StatusStyle(
        label="Online",
        marker_color="#22c55e",
        color_scheme="green",
        badge_color="#22c55e",
        pulse=True,
    ),
    StationStatus.WARNING: StatusStyle(
        label="Warning",
        marker_color="#f59e0b",
        color_scheme="amber",
        badge_color="#f59e0b",
    ),
    StationStatus.OFFLINE: StatusStyle(
        label="Offline",
        marker_color="#ef4444",
        color_scheme="red",
        badge_color="#ef4444",
    ),
    # Markers for anything outside online/warning/offline are blue
    StationStatus.CRITICAL: StatusStyle(
        label="Critical",
        marker_color="#3b82f6",
        color_scheme="crimson",
        badge_color="#b91c1c",
    ),
}

CATEGORY_STYLES: dict[AlertCategory, CategoryStyle] = {
    AlertCategory.OFFLINE: CategoryStyle(color_scheme="red"),
    AlertCategory.WEATHER: CategoryStyle(color_scheme="amber"),
    AlertCategory.OTHER: CategoryStyle(color_scheme="blue"),
}


def _check_exhaustive(enum_cls: type[Enum], mapping: dict) -> None:
    missing = set(enum_cls) - set(mapping)
    if missing:
        names = ", ".join(sorted(m.value for m in missing))
        raise RuntimeError(f"{enum_cls.__name__} members without a display style: {names}")


_check_exhaustive(StationStatus, STATUS_STYLES)
_check_exhaustive(AlertCategory, CATEGORY_STYLES)


def status_style(status: StationStatus | str) -> StatusStyle:
    """Look up the display style for a station status (enum or raw value)."""
    return STATUS_STYLES[StationStatus(status)]


def category_style(category: AlertCategory | str) -> CategoryStyle:
    return CATEGORY_STYLES[AlertCategory(category)]
