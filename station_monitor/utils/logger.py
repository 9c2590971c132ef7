"""
Application logging
- One log directory per app start: app.log (rotating), errors.log
- Console output on stdout for the Reflex dev server
"""

import os
import sys
import time
import logging
import logging.handlers
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from station_monitor import config

SESSION_ID = datetime.now().strftime('%Y%m%d_%H%M%S')

FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-32s | %(funcName)-20s | %(message)s'
CONSOLE_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'


def session_dir(log_dir: str) -> Path:
    path = Path(log_dir) / f"session_{SESSION_ID}"
    path.mkdir(exist_ok=True, parents=True)
    return path


def _handlers(directory: Path) -> List[logging.Handler]:
    file_formatter = logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    # 5 x 10MB
    app_log = logging.handlers.RotatingFileHandler(
        directory / "app.log", maxBytes=10 * 1024 * 1024, backupCount=5, encoding='utf-8'
    )
    app_log.setLevel(logging.DEBUG)
    app_log.setFormatter(file_formatter)

    error_log = logging.FileHandler(directory / "errors.log", encoding='utf-8')
    error_log.setLevel(logging.ERROR)
    error_log.setFormatter(file_formatter)

    stdout = logging.StreamHandler(sys.stdout)
    stdout.setLevel(logging.INFO)
    stdout.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))

    return [app_log, error_log, stdout]


def setup_logging(log_dir: str = config.LOG_DIR, level: str = config.LOG_LEVEL) -> logging.Logger:
    """Configure the root logger. Calling it again replaces the handlers."""
    directory = session_dir(log_dir)

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in _handlers(directory):
        root.addHandler(handler)

    root.info("=" * 60)
    root.info(f"Station Monitor v{config.APP_VERSION} - session {SESSION_ID}")
    root.info(f"Log directory: {directory}")
    root.info(f"Python {sys.version.split()[0]} | display tz {config.DISPLAY_TZ} | "
              f"docker={os.environ.get('DOCKER_CONTAINER', 'False')}")
    root.info("=" * 60)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class LogOperation:
    """Times a block and logs its outcome; exceptions are re-raised."""

    def __init__(self, operation_name: str, logger: Optional[logging.Logger] = None):
        self.operation_name = operation_name
        self.logger = logger or logging.getLogger(__name__)
        self.elapsed: Optional[float] = None
        self._started = 0.0

    def __enter__(self):
        self._started = time.perf_counter()
        self.logger.debug(f"{self.operation_name}: started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self._started
        if exc_type is None:
            self.logger.debug(f"{self.operation_name}: done in {self.elapsed:.3f}s")
        else:
            self.logger.error(f"{self.operation_name}: failed after {self.elapsed:.3f}s ({exc_type.__name__}: {exc_val})")
        return False
