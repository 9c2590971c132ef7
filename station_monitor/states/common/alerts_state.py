"""
Alerts State
- Full alert feed, most recent first
- Acknowledgements are kept per session in BaseState.acknowledged_ids
"""
import reflex as rx
from typing import Any, Dict, List
from reflex.utils import console

from .base import BaseState, alert_to_row


class AlertsState(BaseState):
    """Alert list page"""

    show_acknowledged: bool = True

    @rx.var(cache=False)
    def alerts(self) -> List[Dict[str, Any]]:
        return [alert_to_row(a) for a in self._alert_service().all_alerts]

    @rx.var(cache=False)
    def filtered_alerts(self) -> List[Dict[str, Any]]:
        """Filter alerts based on show_acknowledged"""
        if self.show_acknowledged:
            return self.alerts
        return [a for a in self.alerts if not a["acknowledged"]]

    @rx.var(cache=False)
    def category_counts(self) -> Dict[str, int]:
        return self._alert_service().category_counts()

    @rx.var(cache=False)
    def total_count(self) -> int:
        return len(self.alerts)

    @rx.event
    def toggle_show_acknowledged(self, value: bool):
        self.show_acknowledged = value

    @rx.event
    def acknowledge_alert(self, alert_id: str):
        """Acknowledge an alert for this session"""
        if alert_id in self.acknowledged_ids:
            return
        console.info(f"Acknowledging alert: {alert_id}")
        self.acknowledged_ids = self.acknowledged_ids + [alert_id]

    @rx.event
    def acknowledge_all(self):
        pending = [a.id for a in self._alert_service().pending()]
        self.acknowledged_ids = self.acknowledged_ids + pending
        console.info(f"Acknowledged {len(pending)} alerts")
