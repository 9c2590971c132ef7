"""Station export - tabular CSV for the dashboard's Export button."""
from datetime import datetime
from typing import Iterable, Tuple

import pandas as pd
from reflex.utils import console

from ..models import Station
from ..utils.formatting import format_timestamp, now_local

COLUMNS = [
    "Station ID", "Name", "Status", "Latitude", "Longitude", "Last Updated",
    "Temperature (°C)", "Humidity (%)", "Wind Speed (m/s)", "Solar Radiation (W/m²)",
    "ET0 (mm)", "Rainfall (mm)", "Water Level (m)",
]


def stations_to_frame(stations: Iterable[Station]) -> pd.DataFrame:
    rows = [
        [
            s.id, s.name, s.status.value, s.location.lat, s.location.lng,
            format_timestamp(s.last_updated),
            s.sensors.temperature, s.sensors.humidity, s.sensors.wind_speed,
            s.sensors.solar_radiation, s.sensors.et0, s.sensors.rainfall,
            s.sensors.water_level,
        ]
        for s in stations
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def export_stations_csv(stations: Iterable[Station], now: datetime | None = None) -> Tuple[str, bytes]:
    """
    Render the station set as CSV

    Returns:
        (filename, UTF-8 BOM encoded CSV bytes - BOM so Excel picks up the encoding)
    """
    df = stations_to_frame(stations)
    stamp = (now or now_local()).strftime('%Y%m%d_%H%M%S')
    filename = f"stations_{stamp}.csv"
    console.info(f"Exporting {len(df)} stations to {filename}")
    return filename, df.to_csv(index=False).encode("utf-8-sig")
