"""
Tests for station grouping, relationship lines, popups and the folium map document.
"""

import folium
import pytest

from station_monitor.models import StationStatus
from station_monitor.services.map_service import (
    GROUP_COLORS,
    LINE_DASH,
    WATER,
    WEATHER,
    build_station_map,
    marker_color,
    popup_html,
    relationship_lines,
    render_map_html,
    split_station_groups,
)

from conftest import make_station


@pytest.mark.unit
class TestGrouping:

    def test_alternating_split(self, stations):
        weather, water = split_station_groups(stations)

        assert [s.id for s in weather] == ["station-1", "station-3", "station-5", "station-7"]
        assert [s.id for s in water] == ["station-2", "station-4", "station-6", "station-8"]

    def test_empty(self):
        assert split_station_groups([]) == ([], [])

    def test_single_station_goes_to_weather(self, five_stations):
        weather, water = split_station_groups(five_stations[:1])
        assert len(weather) == 1
        assert water == []


@pytest.mark.unit
class TestRelationshipLines:

    def test_consecutive_pairs_per_group(self, stations):
        weather, water = split_station_groups(stations)
        lines = relationship_lines(weather, water)

        assert len(lines) == (len(weather) - 1) + (len(water) - 1)
        first = lines[0]
        assert first["group"] == WEATHER
        assert first["positions"] == [
            [weather[0].location.lat, weather[0].location.lng],
            [weather[1].location.lat, weather[1].location.lng],
        ]

    def test_line_styles(self, stations):
        for line in relationship_lines(*split_station_groups(stations)):
            assert line["dash_array"] == LINE_DASH == "5, 5"
            assert line["color"] == GROUP_COLORS[line["group"]]

        assert GROUP_COLORS[WEATHER] == "#f97316"
        assert GROUP_COLORS[WATER] == "#3b82f6"

    def test_no_lines_for_single_member_groups(self, five_stations):
        assert relationship_lines(five_stations[:1], five_stations[1:2]) == []


@pytest.mark.unit
class TestPopup:

    def test_links_and_name(self, stations):
        station = stations[0]
        html = popup_html(station, WEATHER)

        assert station.name in html
        assert f'href="/stations/details/{station.id}"' in html
        assert f'href="/stations/sensor-logs/{station.id}"' in html
        assert 'target="_top"' in html
        assert station.device_model in html

    def test_weather_bundle(self, stations):
        html = popup_html(stations[0], WEATHER)
        assert "Temperature" in html
        assert "Solar" in html
        assert "Water Level" not in html

    def test_water_bundle(self, stations):
        station = stations[1]
        html = popup_html(station, WATER)

        assert "Water Level" in html
        assert "Hourly Rainfall" in html
        assert f"{station.sensors.rainfall * 0.2:.2f} mm" in html

    def test_name_is_escaped(self):
        station = make_station(1, StationStatus.ONLINE).model_copy(update={"name": "<b>Pump & Gate</b>"})
        html = popup_html(station, WEATHER)
        assert "&lt;b&gt;Pump &amp; Gate&lt;/b&gt;" in html

    def test_critical_badge(self):
        html = popup_html(make_station(2, StationStatus.CRITICAL), WATER)
        assert "Critical" in html
        assert "#b91c1c" in html

    def test_marker_color(self):
        assert marker_color(StationStatus.ONLINE) == "#22c55e"
        assert marker_color("critical") == "#3b82f6"


@pytest.mark.unit
class TestMapDocument:

    def test_build_station_map(self, stations):
        m = build_station_map(stations)
        children = list(m._children.values())

        markers = [c for c in children if isinstance(c, folium.Marker) and not isinstance(c, folium.CircleMarker)]
        pulses = [c for c in children if isinstance(c, folium.CircleMarker)]
        lines = [c for c in children if isinstance(c, folium.PolyLine)]

        assert len(markers) == len(stations)
        assert len(pulses) == sum(1 for s in stations if s.status == StationStatus.ONLINE)
        assert len(lines) == 6

    def test_rendered_document(self, stations):
        html = render_map_html(stations)

        assert "<html" in html
        assert "leaflet" in html.lower()
        assert ".sm-popup" in html
        assert "/stations/details/station-1" in html

    def test_empty_station_set_still_renders(self):
        assert "leaflet" in render_map_html([]).lower()
