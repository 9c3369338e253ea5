# --------------------------------------------------
# logging_utils.py
# --------------------------------------------------
# This file sets up application-wide structured JSON logging.
#
# Key Features:
#   - Every log entry is a valid JSON object, one line per record
#   - Includes timestamp, log level, and any additional message fields
#   - Designed for log aggregation, parsing, and observability tools
#
# Used mainly for:
#   - Configuration fallback warnings from config.load()
#   - Startup logs of whatever service consumes the Config
#
# --------------------------------------------------

import logging
import sys
import json
from datetime import datetime, timezone


class JSONRequestFormatter(logging.Formatter):
    """
    Custom logging formatter that outputs each log record as a clean JSON line.
    If record.msg is already a dict, it embeds it directly.
    Otherwise, it wraps record.getMessage() inside a field called "msg".
    """

    def format(self, record):
        if isinstance(record.msg, dict):
            payload = record.msg
        else:
            payload = {"msg": record.getMessage()}

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)

        base = {
            "ts": ts.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
        }

        base.update(payload)

        # timedelta and other non-JSON values are rendered with str()
        return json.dumps(base, default=str)


def setup_logging(level: str = "INFO"):
    """
    Configure root logger to emit JSON logs only through stdout.
    Ensures:
      - No multiple handlers
      - Unified log format
      - Log level is configurable (Config.log_level)

    Raises ValueError for an unknown level name (e.g. "verbose").
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONRequestFormatter())

    root = logging.getLogger()
    root.setLevel(level.upper())  # fails before handlers are touched
    root.handlers = []       # Remove any existing handlers to avoid duplicates
    root.addHandler(handler)
