"""Error Log - Timestamped crash reports under Logs/ beside the executable."""

import logging
import sys
from datetime import datetime
from pathlib import Path

LOG_DIR_NAME = "Logs"
LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_error_logger = logging.getLogger("moodcode.errorlog")
_error_logger.propagate = False
_error_logger.setLevel(logging.ERROR)


def resolve_log_dir(log_dir: str | Path | None = None) -> Path:
    if log_dir:
        return Path(log_dir).expanduser()
    return Path(sys.argv[0] or ".").resolve().parent / LOG_DIR_NAME


def log_exception(exc: BaseException, log_dir: str | Path | None = None) -> Path:
    """Append the error and its traceback (causes included) to a new log file."""
    directory = resolve_log_dir(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"error_{datetime.now():%Y%m%d%H%M%S}.log"

    handler = logging.FileHandler(path, mode='a', encoding='utf-8')
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    _error_logger.addHandler(handler)
    try:
        _error_logger.error("Error: %s", exc, exc_info=(type(exc), exc, exc.__traceback__))
    finally:
        _error_logger.removeHandler(handler)
        handler.close()

    return path
