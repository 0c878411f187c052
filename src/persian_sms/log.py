"""JSON log output for SMS delivery events."""

import json
import logging
import sys
from datetime import datetime, timezone

# Context the channels attach with `extra={...}`. Grouped under "sms" so
# delivery events can be filtered on one key in the log store.
SMS_CONTEXT_FIELDS = ("channel", "driver", "endpoint", "status_code", "error")

# The HTTP client logs every request at INFO, repeating the channel's own
# delivery events.
_HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


class JsonFormatter(logging.Formatter):
    """One JSON object per line, delivery context nested under ``sms``."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_entry: dict[str, object] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        sms = {
            name: getattr(record, name)
            for name in SMS_CONTEXT_FIELDS
            if hasattr(record, name)
        }
        if sms:
            log_entry["sms"] = sms

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO") -> None:
    """Send JSON logs to stdout at *level* and quiet the HTTP client."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in _HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
