"""Structured Logging - JSON formatter, setup and per-request access log.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (person_id, error_code, method, path, ...) surfaced when present
    - setup_logging installs at most one handler on the root logger

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - Access log as an HTTP middleware: one line per request with status and duration
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

access_logger = logging.getLogger("person_api.access")

_EXTRA_FIELDS = (
    "person_id", "error_code", "method", "path", "status_code", "duration_ms",
)
_HANDLER_NAME = "person_api"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

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


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    if any(h.get_name() == _HANDLER_NAME for h in logging.root.handlers):
        logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
        return
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


async def log_requests(request: Request, call_next):
    """HTTP middleware: one access-log line per request."""
    started = time.perf_counter()
    response = await call_next(request)
    access_logger.info(
        f"{request.method} {request.url.path} {response.status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        },
    )
    return response
