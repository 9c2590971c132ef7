"""
Tests for the station CSV export.
"""

import io

import pandas as pd
import pytest

from station_monitor.services.export_service import COLUMNS, export_stations_csv, stations_to_frame


@pytest.mark.unit
class TestExport:

    def test_frame_has_one_row_per_station(self, stations):
        df = stations_to_frame(stations)

        assert list(df.columns) == COLUMNS
        assert len(df) == len(stations)
        assert df.iloc[0]["Station ID"] == "station-1"
        assert df.iloc[5]["Status"] == "critical"

    def test_filename_and_bom(self, stations, now):
        filename, data = export_stations_csv(stations, now=now)

        assert filename == "stations_20241019_073000.csv"
        assert data.startswith(b"\xef\xbb\xbf")

    def test_csv_round_trips_readings(self, stations, now):
        _, data = export_stations_csv(stations, now=now)
        df = pd.read_csv(io.BytesIO(data), encoding="utf-8-sig")

        assert list(df.columns) == COLUMNS
        assert df["ET0 (mm)"].tolist() == [s.sensors.et0 for s in stations]

    def test_empty_station_set(self, now):
        filename, data = export_stations_csv([], now=now)
        assert filename.endswith(".csv")
        assert data.decode("utf-8-sig").strip() == ",".join(COLUMNS)
