"""Base state for common functionality across all states."""
import reflex as rx
from typing import Any, Dict, List, Optional
from datetime import datetime

from station_monitor.mock.alerts import get_alerts
from station_monitor.models import Alert, category_style
from station_monitor.services.alert_service import AlertService
from station_monitor.utils.formatting import format_timestamp, now_local


def alert_to_row(alert: Alert) -> Dict[str, Any]:
    """Alert model -> JSON-safe dict for UI vars"""
    return {
        "id": alert.id,
        "station_id": alert.station_id,
        "station_name": alert.station_name,
        "category": alert.category.value,
        "color_scheme": category_style(alert.category).color_scheme,
        "message": alert.message,
        "time": format_timestamp(alert.timestamp),
        "acknowledged": alert.acknowledged,
    }


class BaseState(rx.State):
    """Base state with common functionality for all states."""

    # Common state variables
    error_message: str = ""
    last_update: str = ""

    # Sidebar state - shared across all pages
    sidebar_collapsed: bool = False

    # Alerts acknowledged in this session (alert collaborator is read-only)
    acknowledged_ids: List[str] = []

    def toggle_sidebar(self):
        """Toggle sidebar collapse state"""
        self.sidebar_collapsed = not self.sidebar_collapsed

    def _alert_service(self) -> AlertService:
        """Alert feed with this session's acknowledgements applied"""
        service = AlertService(get_alerts())
        for alert_id in self.acknowledged_ids:
            service = service.acknowledge(alert_id)
        return service

    @rx.var(cache=False)
    def pending_alert_count(self) -> int:
        """Pending alerts for the header bell"""
        return self._alert_service().pending_count

    def update_last_update(self, timestamp: Optional[datetime] = None):
        """Update last update time using the given timestamp or current time."""
        self.last_update = format_timestamp(timestamp or now_local())
