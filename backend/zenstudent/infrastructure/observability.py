"""ZenStudent Logging - one JSON line per record on stderr.

Invariants:
    - Request-scoped fields (user_id, resource_type, resource_id, path,
      error_code, status_code) are copied from `extra` when present; ids
      are written as strings
    - Passwords, hashes and tokens are never passed as extra fields
    - setup_logging is idempotent: a second call replaces the handler
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "user_id", "error_code", "path", "resource_type", "resource_id",
    "category", "status_code",
)


class JSONFormatter(logging.Formatter):
    """Render a record as a single JSON object with the ZenStudent context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val) if not isinstance(val, (int, float)) else val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Install the ZenStudent handler on the root logger ("json" or plain "text")."""
    handler = logging.StreamHandler()
    handler.set_name("zenstudent")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == "zenstudent":
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
