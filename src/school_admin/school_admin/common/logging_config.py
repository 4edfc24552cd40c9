"""Logging configuration utility."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_level: str = "INFO") -> None:
    """Configure root logging once per process."""
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )

    # mysql-connector is chatty at DEBUG
    logging.getLogger("mysql.connector").setLevel(logging.WARNING)
