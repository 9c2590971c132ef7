"""Data models for station_monitor.

Pydantic DTOs for the records handed over by the station and alert
collaborators. Pages keep `dict` dumps of these in state (Reflex vars must be
JSON serializable); services work on the typed models.
"""

from __future__ import annotations

from datetime import date as CalendarDate, datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .status import AlertCategory, StationStatus

__all__ = [
    "Location",
    "SensorReadings",
    "Station",
    "Alert",
    "HistoricalDataPoint",
    "ChartPoint",
    "METRICS",
]

# Numeric fields carried by both SensorReadings and HistoricalDataPoint
METRICS = (
    "et0",
    "rainfall",
    "water_level",
    "temperature",
    "humidity",
    "wind_speed",
    "solar_radiation",
)


class _TZModel(BaseModel):
    """Base with tz-aware datetime normalization to UTC when missing."""

    @staticmethod
    def _ensure_tz(dt: datetime) -> datetime:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt


class Location(BaseModel):
    lat: float
    lng: float


class SensorReadings(BaseModel):
    temperature: float = 0.0
    humidity: float = 0.0
    wind_speed: float = 0.0
    solar_radiation: float = 0.0
    et0: float = 0.0
    rainfall: float = 0.0
    water_level: float = 0.0


class Station(_TZModel):
    id: str
    name: str
    status: StationStatus
    location: Location
    last_updated: datetime
    sensors: SensorReadings = Field(default_factory=SensorReadings)
    device_model: Optional[str] = None

    @field_validator("last_updated")
    @classmethod
    def _tz_last_updated(cls, v: datetime) -> datetime:  # noqa: N805
        return cls._ensure_tz(v)


class Alert(_TZModel):
    id: str
    station_id: str = ""
    station_name: str
    category: AlertCategory
    message: str
    timestamp: datetime
    acknowledged: bool = False

    @field_validator("timestamp")
    @classmethod
    def _tz_timestamp(cls, v: datetime) -> datetime:  # noqa: N805
        return cls._ensure_tz(v)


class HistoricalDataPoint(BaseModel):
    date: CalendarDate
    et0: float
    rainfall: float
    water_level: float
    temperature: float
    humidity: float
    wind_speed: float
    solar_radiation: float


class ChartPoint(BaseModel):
    """One point of a trend chart; `value=None` means no reading for that label."""
    date: str
    value: Optional[float] = None
