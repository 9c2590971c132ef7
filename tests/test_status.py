"""
Tests for status / category display mappings.
"""

from enum import Enum

import pytest

from station_monitor.models import AlertCategory, StationStatus, category_style, status_style
from station_monitor.models.status import CATEGORY_STYLES, STATUS_STYLES, _check_exhaustive


@pytest.mark.unit
class TestStatusStyles:

    def test_every_status_has_a_style(self):
        assert set(STATUS_STYLES) == set(StationStatus)

    def test_every_category_has_a_style(self):
        assert set(CATEGORY_STYLES) == set(AlertCategory)

    @pytest.mark.parametrize(
        "status, color",
        [
            ("online", "#22c55e"),
            ("warning", "#f59e0b"),
            ("offline", "#ef4444"),
            ("critical", "#3b82f6"),
        ],
    )
    def test_marker_colors(self, status, color):
        assert status_style(status).marker_color == color
        assert status_style(StationStatus(status)).marker_color == color

    def test_critical_badge_is_dark_red(self):
        style = status_style(StationStatus.CRITICAL)
        assert style.badge_color == "#b91c1c"
        assert style.marker_color != style.badge_color

    def test_only_online_pulses(self):
        assert [s for s in StationStatus if status_style(s).pulse] == [StationStatus.ONLINE]

    def test_category_color_schemes(self):
        assert category_style("offline").color_scheme == "red"
        assert category_style(AlertCategory.WEATHER).color_scheme == "amber"
        assert category_style("other").color_scheme == "blue"

    def test_unknown_value_raises(self):
        with pytest.raises(ValueError):
            status_style("maintenance")

    def test_incomplete_mapping_is_rejected(self):
        class Level(Enum):
            LOW = "low"
            HIGH = "high"

        with pytest.raises(RuntimeError, match="high"):
            _check_exhaustive(Level, {Level.LOW: object()})
