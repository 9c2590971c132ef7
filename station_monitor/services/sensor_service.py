"""
Sensor Aggregation Service
- Read-only aggregates over the current station set
- Empty station set degrades to zero values, never raises
"""
from typing import Dict, Iterable, List, Optional
import logging

from reflex.utils import console

from ..models import METRICS, Station, StationStatus

logger = logging.getLogger(__name__)


class SensorService:
    """Aggregates over an in-memory station snapshot"""

    def __init__(self, stations: Iterable[Station]):
        """
        Initialize service with a station snapshot

        Args:
            stations: Stations supplied by the station collaborator
        """
        self.stations: List[Station] = list(stations)

    @property
    def online_count(self) -> int:
        """Number of stations currently reporting as online"""
        return sum(1 for s in self.stations if s.status == StationStatus.ONLINE)

    def status_counts(self) -> Dict[str, int]:
        """Count per status; every status is present, zero when unused"""
        counts = {status.value: 0 for status in StationStatus}
        for station in self.stations:
            counts[station.status.value] += 1
        return counts

    def average(self, metric: str) -> float:
        """
        Mean of one sensor metric across all stations

        Args:
            metric: One of models.METRICS (e.g. "et0", "water_level")

        Returns:
            Arithmetic mean, or 0.0 for an empty station set
        """
        if metric not in METRICS:
            raise ValueError(f"Unknown sensor metric: {metric}")

        if not self.stations:
            logger.debug(f"average({metric}) over empty station set")
            return 0.0

        total = sum(getattr(s.sensors, metric) for s in self.stations)
        return total / len(self.stations)

    def average_et0(self) -> float:
        return self.average("et0")

    def average_rainfall(self) -> float:
        return self.average("rainfall")

    def average_water_level(self) -> float:
        return self.average("water_level")

    def get_station(self, station_id: str) -> Optional[Station]:
        """Find a station by id, None when it is not in the snapshot"""
        for station in self.stations:
            if station.id == station_id:
                return station
        console.warn(f"Station not found: {station_id}")
        return None

    def __repr__(self):
        return f"<{self.__class__.__name__}(stations={len(self.stations)})>"
