"""
Alert Feed Service
- Most-recent-first ordering (stable for equal timestamps)
- Pending = not yet acknowledged
- Acknowledge returns a new service, the source list is never mutated
"""
from typing import Dict, Iterable, List

from reflex.utils import console

from ..models import Alert, AlertCategory


class AlertService:
    """Alert list facade over the alert collaborator's records"""

    def __init__(self, alerts: Iterable[Alert]):
        # sorted() is stable: alerts sharing a timestamp keep source order
        self._alerts: List[Alert] = sorted(alerts, key=lambda a: a.timestamp, reverse=True)

    @property
    def all_alerts(self) -> List[Alert]:
        return list(self._alerts)

    @property
    def pending_count(self) -> int:
        return sum(1 for a in self._alerts if not a.acknowledged)

    def pending(self) -> List[Alert]:
        return [a for a in self._alerts if not a.acknowledged]

    def recent(self, limit: int = 4) -> List[Alert]:
        """
        Bounded prefix of the feed for summary panels

        Args:
            limit: Max number of alerts (negative treated as 0)

        Returns:
            First `limit` alerts, in feed order
        """
        return self._alerts[:max(0, limit)]

    def category_counts(self) -> Dict[str, int]:
        counts = {category.value: 0 for category in AlertCategory}
        for alert in self._alerts:
            counts[alert.category.value] += 1
        return counts

    def acknowledge(self, alert_id: str) -> "AlertService":
        """
        Mark one alert as acknowledged

        Args:
            alert_id: Alert id

        Returns:
            New AlertService with the alert flagged (unchanged if id unknown)
        """
        found = False
        updated = []
        for alert in self._alerts:
            if alert.id == alert_id:
                found = True
                alert = alert.model_copy(update={"acknowledged": True})
            updated.append(alert)

        if found:
            console.debug(f"Acknowledged alert {alert_id}")
        else:
            console.warn(f"Cannot acknowledge unknown alert {alert_id}")
        return AlertService(updated)

    def __len__(self):
        return len(self._alerts)
