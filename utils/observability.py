"""
Logging setup. JSON lines in production, a readable single-line format otherwise.
Called once from the app factory.
"""
import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("upstream_path", "upstream_status", "username")


class JSONFormatter(logging.Formatter):
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
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Install a single root handler; repeated calls replace it instead of stacking."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_users_proxy", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._users_proxy = True  # type: ignore[attr-defined]
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
