"""Server logging setup.

``jobdesk serve`` sends the application's own loggers and uvicorn's to one
rotating file at INFO, whatever ``--debug`` says, so a server started by a
process manager still leaves a trail.  The console keeps the CLI's level.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from jobdesk.core.paths import get_log_dir

LOG_FILE_NAME = "jobdesk-api.log"

# Loggers whose records end up in the server log file.
SERVER_LOGGERS = ("jobdesk", "uvicorn.error", "uvicorn.access")

_MAX_BYTES = 2 * 1024 * 1024
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ServerFileHandler(RotatingFileHandler):
    """Marker subclass so repeated setup calls can find what they added."""


def _attached_handler(logger: logging.Logger) -> _ServerFileHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, _ServerFileHandler):
            return handler
    return None


def configure_server_logging(log_dir: Path | None = None) -> Path:
    """Attach the rotating file handler and return the log file path.

    Calling it again is a no-op and returns the file already in use.
    """
    app_logger = logging.getLogger(SERVER_LOGGERS[0])
    existing = _attached_handler(app_logger)
    if existing is not None:
        return Path(existing.baseFilename)

    log_dir = log_dir or get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    handler = _ServerFileHandler(
        log_file,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))

    for name in SERVER_LOGGERS:
        logger = logging.getLogger(name)
        logger.addHandler(handler)
        if logger.level == logging.NOTSET or logger.level > logging.INFO:
            logger.setLevel(logging.INFO)

    return log_file


def reset_server_logging() -> None:
    """Detach and close the file handler (tests)."""
    handler = _attached_handler(logging.getLogger(SERVER_LOGGERS[0]))
    if handler is None:
        return
    for name in SERVER_LOGGERS:
        logging.getLogger(name).removeHandler(handler)
    handler.close()
