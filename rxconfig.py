"""Reflex configuration file for the Station Monitoring Application"""

import reflex as rx
import os

config = rx.Config(
    app_name="station_monitor",

    # Port configuration
    frontend_port=int(os.getenv("FRONTEND_PORT", "3000")),
    backend_port=int(os.getenv("BACKEND_PORT", "8000")),

    # Backend host
    backend_host="0.0.0.0",

    # Environment
    env=rx.Env.DEV if os.getenv("ENVIRONMENT", "development") == "development" else rx.Env.PROD,

    # Telemetry
    telemetry_enabled=False,
)
