"""
Logging setup.

Configures the dedicated "lumisky" logger (not the root logger) so that
pygame / openai / httpx chatter stays out of the simulation log.
"""
from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from . import config as C

LOGGER_NAME = "lumisky"


def setup_logging(level: str = C.LOG_LEVEL, log_dir: Path | None = C.RUNS_DIR, run_id: str | None = None) -> logging.Logger:
    """
    Configure the application logger with a console handler and, when
    ``log_dir`` is given, a file handler under ``<log_dir>/<run_id>/lumisky.log``.

    Safe to call more than once: existing handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    logger.propagate = False

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(C.LOG_FORMAT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    log_file = None
    if log_dir is not None:
        run_id = run_id or f"run_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        run_dir = Path(log_dir) / run_id
        run_dir.mkdir(parents=True, exist_ok=True)
        log_file = run_dir / "lumisky.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized. Level: {level.upper()}. Log file: {log_file}")
    return logger
