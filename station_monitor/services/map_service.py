"""
Map Service - station markers, group lines and popups as a folium document
- The map renders inside an iframe, so popup CSS ships with the document
- Popup links target the top window to navigate the app itself
"""
from __future__ import annotations

from html import escape
from typing import Any, Dict, List, Optional, Sequence, Tuple

import folium
from reflex.utils import console

from .. import config
from ..models import Station, StationStatus, status_style
from ..utils.formatting import format_popup_timestamp, format_value
from ..utils.logger import LogOperation, get_logger

logger = get_logger(__name__)

WEATHER = "weather"
WATER = "water"

GROUP_COLORS = {
    WEATHER: "#f97316",  # orange
    WATER: "#3b82f6",    # blue
}
LINE_DASH = "5, 5"

POPUP_CSS = """
.leaflet-popup-content-wrapper {
  border-radius: 8px;
  padding: 0;
  overflow: hidden;
  box-shadow: 0 10px 25px -5px rgba(0, 0, 0, 0.1), 0 10px 10px -5px rgba(0, 0, 0, 0.04);
}
.leaflet-popup-content { margin: 0; width: auto !important; max-width: 350px; }
.leaflet-popup-close-button { color: white !important; font-size: 18px !important; z-index: 10; top: 7px !important; right: 7px !important; }
.leaflet-popup-tip { background: white; }
@media (max-width: 500px) { .leaflet-popup-content { width: 280px !important; } }
@media (max-width: 350px) { .leaflet-popup-content { width: 250px !important; } }
.sm-popup { font-family: Inter, system-ui, sans-serif; width: 300px; }
.sm-popup-header { color: white; padding: 12px; }
.sm-popup-header h3 { margin: 0; font-size: 15px; font-weight: 700; }
.sm-popup-meta { display: flex; justify-content: space-between; font-size: 11px; opacity: 0.9; margin-top: 6px; }
.sm-chip { padding: 1px 8px; border-radius: 9999px; background: rgba(255,255,255,0.2); }
.sm-badge { display: inline-block; padding: 2px 10px; border-radius: 9999px; color: white; font-size: 11px; font-weight: 600; }
.sm-popup-body { padding: 12px; display: flex; flex-direction: column; gap: 8px; }
.sm-grid { display: grid; grid-template-columns: 1fr 1fr; gap: 8px; }
.sm-cell { border: 1px solid #e5e7eb; border-radius: 8px; padding: 6px 8px; }
.sm-label { font-size: 11px; color: #6b7280; }
.sm-value { font-size: 14px; font-weight: 600; color: #111827; }
.sm-actions { display: flex; gap: 8px; }
.sm-actions a { flex: 1; text-align: center; font-size: 12px; padding: 6px 0; border-radius: 6px; text-decoration: none; }
.sm-primary { background: #2563eb; color: white; }
.sm-outline { border: 1px solid #d1d5db; color: #111827; }
"""

# Page-level styles for the map view (frame, legend), registered on mount
MAP_PAGE_CSS = """
.station-map-frame { width: 100%; border: 0; border-radius: 12px; box-shadow: 0 4px 12px rgba(0,0,0,0.08); }
.station-legend-dot { width: 10px; height: 10px; border-radius: 9999px; display: inline-block; }
.station-legend-dot.pulse { animation: station-pulse 2s infinite; }
@keyframes station-pulse { 0%, 100% { opacity: 1; } 50% { opacity: 0.35; } }
"""


def split_station_groups(stations: Sequence[Station]) -> Tuple[List[Station], List[Station]]:
    """
    Partition stations into (weather, water) display groups

    Placeholder rule until stations carry a sensor type: even list
    positions are weather stations, odd positions water stations.
    """
    weather = [s for i, s in enumerate(stations) if i % 2 == 0]
    water = [s for i, s in enumerate(stations) if i % 2 == 1]
    return weather, water


def marker_color(status: StationStatus | str) -> str:
    return status_style(status).marker_color


def relationship_lines(weather: Sequence[Station], water: Sequence[Station]) -> List[Dict[str, Any]]:
    """Dashed polylines joining consecutive stations of each group, in list order."""
    lines = []
    for group, members in ((WEATHER, weather), (WATER, water)):
        for a, b in zip(members, members[1:]):
            lines.append({
                "group": group,
                "positions": [[a.location.lat, a.location.lng], [b.location.lat, b.location.lng]],
                "color": GROUP_COLORS[group],
                "dash_array": LINE_DASH,
            })
    return lines


def _status_badge_html(station: Station) -> str:
    style = status_style(station.status)
    return f'<span class="sm-badge" style="background:{style.badge_color}">{style.label}</span>'


def _cell(label: str, value: str) -> str:
    return (
        f'<div class="sm-cell"><div class="sm-label">{label}</div>'
        f'<div class="sm-value">{value}</div></div>'
    )


def popup_html(station: Station, group: str) -> str:
    """Detail popup for one marker: header, sensor bundle, navigation links."""
    sensors = station.sensors
    header_color = "#0f766e" if group == WEATHER else "#2563eb"
    device = escape(station.device_model or "")

    if group == WEATHER:
        body = (
            '<div class="sm-grid">'
            + _cell("Temperature", f"{format_value(sensors.temperature, 1)} °C")
            + _cell("ET₀", f"{format_value(sensors.et0, 2)} mm")
            + _cell("Wind", f"{format_value(sensors.wind_speed, 1)} m/s")
            + _cell("Solar", f"{format_value(sensors.solar_radiation, 0)} W/m²")
            + '</div>'
        )
    else:
        body = (
            '<div class="sm-grid">'
            + _cell("Rainfall", f"{format_value(sensors.rainfall, 2)} mm")
            + _cell("Water Level", f"{format_value(sensors.water_level, 2)} m")
            + _cell("Hourly Rainfall", f"{format_value(sensors.rainfall * 0.2, 2)} mm")
            + _cell("Daily Rainfall", f"{format_value(sensors.rainfall, 2)} mm")
            + '</div>'
        )

    sid = escape(station.id, quote=True)
    return f"""
    <div class="sm-popup">
        <div class="sm-popup-header" style="background:{header_color}">
            <div style="display:flex; justify-content:space-between; align-items:flex-start; gap:8px;">
                <h3>{escape(station.name)}</h3>
                {_status_badge_html(station)}
            </div>
            <div class="sm-popup-meta">
                <span>{format_popup_timestamp(station.last_updated)}</span>
                <span class="sm-chip">{device}</span>
            </div>
        </div>
        <div class="sm-popup-body">
            {body}
            <div class="sm-actions">
                <a class="sm-primary" href="/stations/details/{sid}" target="_top">Details</a>
                <a class="sm-outline" href="/stations/sensor-logs/{sid}" target="_top">Logs</a>
            </div>
        </div>
    </div>"""


def _marker_icon(station: Station, group: str) -> folium.DivIcon:
    color = marker_color(station.status)
    glyph = "☀" if group == WEATHER else "💧"
    icon_html = (
        f'<div style="width:26px;height:26px;border-radius:50% 50% 50% 0;transform:rotate(-45deg);'
        f'background:{color};border:2px solid white;box-shadow:0 1px 4px rgba(0,0,0,0.4);'
        f'display:flex;align-items:center;justify-content:center;">'
        f'<span style="transform:rotate(45deg);font-size:12px;">{glyph}</span></div>'
    )
    return folium.DivIcon(html=icon_html, icon_size=(26, 26), icon_anchor=(13, 26))


def build_station_map(
    stations: Sequence[Station],
    center: Optional[Tuple[float, float]] = None,
    zoom: Optional[int] = None,
) -> folium.Map:
    """Folium map with group lines, pulse rings for online stations and one marker per station."""
    m = folium.Map(
        location=list(center or config.MAP_CENTER),
        zoom_start=zoom or config.MAP_ZOOM,
        tiles="OpenStreetMap",
        zoom_control=True,
    )
    m.get_root().header.add_child(folium.Element(f"<style>{POPUP_CSS}</style>"))

    weather, water = split_station_groups(stations)

    for line in relationship_lines(weather, water):
        folium.PolyLine(
            line["positions"],
            color=line["color"],
            weight=2,
            opacity=0.7,
            dash_array=line["dash_array"],
        ).add_to(m)

    for group, members in ((WEATHER, weather), (WATER, water)):
        for station in members:
            position = [station.location.lat, station.location.lng]
            if status_style(station.status).pulse:
                folium.CircleMarker(
                    position,
                    radius=20,
                    color=GROUP_COLORS[group],
                    fill=True,
                    fill_color=GROUP_COLORS[group],
                    fill_opacity=0.2,
                    weight=1,
                ).add_to(m)

            folium.Marker(
                position,
                icon=_marker_icon(station, group),
                popup=folium.Popup(popup_html(station, group), max_width=350),
                tooltip=station.name,
            ).add_to(m)

    return m


def render_map_html(stations: Sequence[Station]) -> str:
    """Standalone HTML document of the station map (used as iframe srcdoc)."""
    try:
        with LogOperation(f"render map ({len(stations)} stations)", logger):
            return build_station_map(stations).get_root().render()
    except Exception as e:
        console.error(f"Map rendering failed: {e}")
        return ""
