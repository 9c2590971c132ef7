"""
Tests for logging setup and timed operations.
"""

import logging

import pytest

from station_monitor.utils.logger import LogOperation, setup_logging


@pytest.fixture
def configure():
    """setup_logging, with the handlers it installs removed afterwards."""
    root = logging.getLogger()
    level = root.level
    installed = []

    def _configure(log_dir, log_level):
        configured = setup_logging(log_dir, log_level)
        installed.extend(configured.handlers)
        return configured

    yield _configure
    for handler in installed:
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)


@pytest.mark.unit
class TestSetupLogging:

    def test_creates_session_logs(self, tmp_path, configure):
        root = configure(str(tmp_path), "DEBUG")

        sessions = list(tmp_path.glob("session_*"))
        assert len(sessions) == 1
        assert (sessions[0] / "app.log").exists()
        assert (sessions[0] / "errors.log").exists()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 3

    def test_repeated_setup_replaces_handlers(self, tmp_path, configure):
        configure(str(tmp_path), "INFO")
        root = configure(str(tmp_path), "INFO")
        assert len(root.handlers) == 3

    def test_unknown_level_falls_back_to_info(self, tmp_path, configure):
        assert configure(str(tmp_path), "chatty").level == logging.INFO


@pytest.mark.unit
class TestLogOperation:

    def test_success_records_elapsed(self, caplog):
        logger = logging.getLogger("tests.op")
        with caplog.at_level(logging.DEBUG, logger="tests.op"):
            with LogOperation("render", logger) as op:
                pass

        assert op.elapsed is not None and op.elapsed >= 0
        assert "render: done" in caplog.text

    def test_failure_is_logged_and_reraised(self, caplog):
        logger = logging.getLogger("tests.op")
        with caplog.at_level(logging.DEBUG, logger="tests.op"):
            with pytest.raises(ValueError):
                with LogOperation("render", logger):
                    raise ValueError("bad station")

        assert "render: failed" in caplog.text
        assert "bad station" in caplog.text
