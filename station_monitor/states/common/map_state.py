"""
Station Map State
- Renders the folium map document once per mount
- Registers the page stylesheet on mount and always removes it on unmount
"""
import reflex as rx
from typing import Dict
from reflex.utils import console

from station_monitor.mock.stations import get_stations
from station_monitor.services.map_service import MAP_PAGE_CSS, render_map_html
from station_monitor.services.sensor_service import SensorService
from station_monitor.utils.styles import registry

from .base import BaseState

MAP_STYLE_NAME = "station-map"


def mount_styles(owner: str) -> str:
    """Register the map page stylesheet for `owner`; returns the inject script."""
    handle = registry.acquire(owner, MAP_STYLE_NAME, MAP_PAGE_CSS)
    return handle.inject_script(MAP_PAGE_CSS)


def unmount_styles(owner: str) -> str:
    """Deregister the map page stylesheet for `owner`; returns the remove script."""
    handle = registry.handle_for(owner, MAP_STYLE_NAME)
    registry.release(handle)
    return handle.remove_script()


class MapState(BaseState):
    """Map page state: unmounted -> mounted(fetching) -> mounted(rendered)"""

    map_html: str = ""
    status_counts: Dict[str, int] = {}
    station_count: int = 0
    loading: bool = False

    def _owner(self) -> str:
        return self.router.session.client_token

    @rx.event
    def on_mount(self):
        self.loading = True
        self.error_message = ""
        yield rx.call_script(mount_styles(self._owner()))

        try:
            stations = get_stations()
            service = SensorService(stations)
            self.map_html = render_map_html(stations)
            self.status_counts = service.status_counts()
            self.station_count = len(stations)
            self.update_last_update()
            if not self.map_html:
                self.error_message = "Map could not be rendered"
            console.info(f"Map rendered with {len(stations)} stations")
        except Exception as e:
            console.error(f"Map load failed: {e}")
            self.error_message = str(e)
        finally:
            self.loading = False

    @rx.event
    def on_unmount(self):
        self.map_html = ""
        return rx.call_script(unmount_styles(self._owner()))
