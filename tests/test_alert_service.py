"""
Tests for the alert feed service.
"""

from datetime import timedelta

import pytest

from station_monitor.models import Alert, AlertCategory
from station_monitor.services.alert_service import AlertService


def _alert(i, ts, acknowledged=False, category=AlertCategory.OTHER):
    return Alert(
        id=f"a{i}",
        station_name=f"Station {i}",
        category=category,
        message=f"message {i}",
        timestamp=ts,
        acknowledged=acknowledged,
    )


@pytest.mark.unit
class TestAlertService:
    """Ordering, prefix, pending count and acknowledgement."""

    def test_most_recent_first(self, alerts):
        service = AlertService(reversed(alerts))
        stamps = [a.timestamp for a in service.all_alerts]
        assert stamps == sorted(stamps, reverse=True)

    def test_ties_keep_source_order(self, now):
        items = [_alert(1, now), _alert(2, now), _alert(3, now - timedelta(hours=1)), _alert(4, now)]
        ids = [a.id for a in AlertService(items).all_alerts]
        assert ids == ["a1", "a2", "a4", "a3"]

    def test_recent_is_prefix_of_all(self, alerts):
        service = AlertService(alerts)
        recent = service.recent(4)

        assert len(recent) == 4
        assert [a.id for a in recent] == [a.id for a in service.all_alerts[:4]]

    def test_recent_with_fewer_alerts(self, now):
        service = AlertService([_alert(1, now), _alert(2, now - timedelta(minutes=1))])
        assert [a.id for a in service.recent(4)] == ["a1", "a2"]
        assert service.recent(0) == []

    def test_pending_count(self, alerts):
        service = AlertService(alerts)
        assert service.pending_count == 4
        assert all(not a.acknowledged for a in service.pending())

    def test_empty_feed(self):
        service = AlertService([])
        assert service.all_alerts == []
        assert service.pending_count == 0
        assert service.recent() == []
        assert len(service) == 0

    def test_acknowledge_returns_new_service(self, alerts):
        service = AlertService(alerts)
        updated = service.acknowledge("alert-1")

        assert updated.pending_count == service.pending_count - 1
        assert service.pending_count == 4
        assert next(a for a in updated.all_alerts if a.id == "alert-1").acknowledged

    def test_acknowledge_unknown_id_is_noop(self, alerts):
        service = AlertService(alerts)
        updated = service.acknowledge("missing")
        assert updated.pending_count == service.pending_count
        assert len(updated) == len(service)

    def test_category_counts(self, alerts):
        counts = AlertService(alerts).category_counts()
        assert counts == {"offline": 2, "weather": 3, "other": 2}
