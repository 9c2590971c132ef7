"""Date and number formatting shared by states and components."""
from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Union

import pytz

from station_monitor import config


def display_tz():
    return pytz.timezone(config.DISPLAY_TZ)


def to_display_tz(dt: datetime) -> datetime:
    """Convert to the display timezone; naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = pytz.UTC.localize(dt)
    return dt.astimezone(display_tz())


def now_local() -> datetime:
    return datetime.now(display_tz())


def today_local() -> date:
    return now_local().date()


def _hour12(dt: datetime) -> tuple[int, str]:
    hour = dt.hour % 12 or 12
    return hour, "AM" if dt.hour < 12 else "PM"


def format_chart_label(value: Union[date, datetime, str]) -> str:
    """Axis label for trend charts, e.g. ``Oct 19, 12 AM``.

    Calendar dates are labelled at local midnight. Strings are parsed as ISO
    dates/datetimes; anything unparseable is returned unchanged.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = to_display_tz(value)
    else:
        value = datetime.combine(value, time.min)

    hour, meridiem = _hour12(value)
    return f"{value.strftime('%b')} {value.day}, {hour} {meridiem}"


def format_popup_timestamp(dt: datetime) -> str:
    """Last-update stamp shown in map popups, e.g. ``Oct 19, 02:30 PM``."""
    local = to_display_tz(dt)
    hour, meridiem = _hour12(local)
    return f"{local.strftime('%b')} {local.day:02d}, {hour:02d}:{local.minute:02d} {meridiem}"


def format_timestamp(dt: datetime) -> str:
    return to_display_tz(dt).strftime("%Y-%m-%d %H:%M:%S")


def format_value(value: Optional[float], digits: int = 2) -> str:
    """Fixed-point display value; missing readings render as a dash."""
    if value is None:
        return "-"
    return f"{value:.{digits}f}"
