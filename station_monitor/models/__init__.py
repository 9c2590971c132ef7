from .status import (
    AlertCategory,
    CategoryStyle,
    StationStatus,
    StatusStyle,
    category_style,
    status_style,
)
from .models import (
    METRICS,
    Alert,
    ChartPoint,
    HistoricalDataPoint,
    Location,
    SensorReadings,
    Station,
)
