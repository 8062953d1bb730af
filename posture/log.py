"""
Posture - Logging

Root logger setup driven by LogSettings.
"""

import json
import logging
from datetime import datetime, timezone

from posture.config import get_settings


class JsonFormatter(logging.Formatter):
    """Renders each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(settings=None) -> logging.Handler:
    """
    Install a root handler honoring LOG_LEVEL and LOG_FORMAT.

    Replaces any handler installed by a previous call.

    Returns:
        The installed handler
    """
    settings = settings or get_settings()

    handler = logging.StreamHandler()
    if settings.log.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == "posture":
            root.removeHandler(existing)
    handler.set_name("posture")
    root.addHandler(handler)
    root.setLevel(settings.log.level)
    return handler
