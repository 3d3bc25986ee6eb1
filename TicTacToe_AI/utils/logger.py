"""Lightweight logging utilities for matches and debugging."""

import datetime
import logging

MATCH_LOGGER = logging.getLogger("TicTacToe_AI.match")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level="INFO"):
    """Install a stderr handler on the root logger; `level` is a name or an int."""
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"unknown log level: {level!r}")
        level = numeric
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    MATCH_LOGGER.info(f"[{timestamp}] {message}")
