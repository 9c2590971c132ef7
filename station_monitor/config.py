"""Runtime settings for the Station Monitor application.

All values come from environment variables so the same build can run
against different deployments without code changes.
"""

import os

# Dashboard history window (days) used by the trend charts
HISTORY_DAYS = int(os.getenv("HISTORY_DAYS", "7"))

# Number of alerts shown in the dashboard summary panel
RECENT_ALERT_LIMIT = int(os.getenv("RECENT_ALERT_LIMIT", "4"))

# Page timers (seconds)
CLOCK_INTERVAL = float(os.getenv("CLOCK_INTERVAL", "1.0"))
PULSE_INTERVAL = float(os.getenv("PULSE_INTERVAL", "5.0"))
PULSE_DURATION = float(os.getenv("PULSE_DURATION", "1.0"))

# The open dashboard pings the backend every CLIENT_HEARTBEAT_INTERVAL seconds;
# its timer loop stops once no ping arrives for CLIENT_HEARTBEAT_TIMEOUT seconds
CLIENT_HEARTBEAT_INTERVAL = float(os.getenv("CLIENT_HEARTBEAT_INTERVAL", "10.0"))
CLIENT_HEARTBEAT_TIMEOUT = float(os.getenv("CLIENT_HEARTBEAT_TIMEOUT", "180.0"))

# Registered page styles older than this (seconds) belong to closed tabs
STYLE_MAX_AGE = float(os.getenv("STYLE_MAX_AGE", "86400"))

# Timezone used for every timestamp shown in the UI
DISPLAY_TZ = os.getenv("DISPLAY_TZ", "Asia/Bangkok")

# Map defaults (north-east Thailand irrigation network)
MAP_CENTER = (
    float(os.getenv("MAP_CENTER_LAT", "16.5434")),
    float(os.getenv("MAP_CENTER_LNG", "104.7235")),
)
MAP_ZOOM = int(os.getenv("MAP_ZOOM", "8"))
MAP_HEIGHT = int(os.getenv("MAP_HEIGHT", "600"))

# Logging
LOG_DIR = os.getenv("LOG_DIR", "/tmp/station_monitor_logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

APP_VERSION = "1.0.0"
