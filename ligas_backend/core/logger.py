# logger.py
# Handlers are attached once, to the "ligas_backend" package logger.
# Module loggers are plain children and propagate up to it.

import logging
import sys
from datetime import date
from pathlib import Path

from ligas_backend.core import config

PACKAGE_LOGGER = "ligas_backend"
LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


def _configure_package_logger() -> logging.Logger:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return package_logger

    package_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    package_logger.addHandler(console)

    # Daily file, skipped in test runs
    if config.LOG_DIR and not config.TEST_MODE:
        log_dir = Path(config.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / f"ligas_api_{date.today():%Y%m%d}.log", encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger


def setup_logger(name: str) -> logging.Logger:
    """Logger for a ligas_backend module, e.g. setup_logger(__name__)."""
    _configure_package_logger()
    return logging.getLogger(name)
