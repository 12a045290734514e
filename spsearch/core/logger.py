"""
Logging setup for the debug server and host scripts.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import get_log_file, get_log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# requests' transport logs every connection at DEBUG; keep it out unless asked for
_TRANSPORT_LOGGERS = ("urllib3", "urllib3.connectionpool")


def setup_logger(level: Optional[str] = None, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the "spsearch" logger tree.

    Args:
        level: Overrides SPSEARCH_LOG_LEVEL
        log_file: Overrides SPSEARCH_LOG_FILE; stdout is always attached

    Returns:
        The package logger
    """
    level = (level or get_log_level()).upper()
    log_level = getattr(logging, level, logging.INFO)
    log_file = log_file or get_log_file()

    logger = logging.getLogger("spsearch")
    logger.handlers.clear()
    logger.setLevel(log_level)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    transport_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)

    logger.debug(f"Logging at {level}" + (f", file {log_file}" if log_file else ""))
    return logger
