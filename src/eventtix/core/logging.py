"""Logging configuration for the upload service."""

import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from eventtix.core.config import Settings, settings

# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message"}


class JsonLogFormatter(logging.Formatter):
    """Renders each record as one JSON line.

    Upload logs pass ``owner_id`` and ``stored_filename`` through
    ``extra={...}``; such fields land at the top level of the object.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                "%Y-%m-%dT%H:%M:%S.%fZ"
            ),
            "severity": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        entry.update(self._extra_fields(record))
        if record.exc_info:
            entry.update(self._exception_fields(record.exc_info))
        return json.dumps(entry, default=str, ensure_ascii=False)

    @staticmethod
    def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
        return {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES
        }

    @staticmethod
    def _exception_fields(exc_info) -> Dict[str, str]:
        exc_type, exc_value, _ = exc_info
        return {
            "exception": "".join(traceback.format_exception(*exc_info)),
            "exception_type": exc_type.__name__ if exc_type else "Unknown",
            "exception_message": str(exc_value) if exc_value else "",
        }


def setup_logging(app_settings: Optional[Settings] = None) -> None:
    """Send logs to stdout: plain text locally, JSON lines elsewhere.

    Local development logs at DEBUG; other environments use ``LOG_LEVEL``.
    The uvicorn loggers share the same handler and level.
    """
    app_settings = app_settings or settings
    local = app_settings.ENV == "local"
    if local:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, app_settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        if local
        else JsonLogFormatter()
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.setLevel(log_level)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(handler)
        uvicorn_logger.propagate = False
