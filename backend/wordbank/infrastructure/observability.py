"""Structured Logging — JSON log lines and per-request access logging.

Invariants:
    - Every line carries timestamp, level, logger and message
    - Known extras (user_id, failure_kind, path, method, status_code,
      duration_ms) are copied onto the line only when set
    - Raw session tokens, admin tokens and passwords are never logged:
      the access log records method and path, never headers or bodies
    - A request whose handler raises is still access-logged, as status 500,
      before the exception propagates

Design Decisions:
    - Formatter on stdlib logging, no structlog: one small class is enough
    - setup_logging owns a single named root handler and replaces it on
      re-run, so repeated app construction (tests) does not duplicate lines
"""

import json
import logging
import time
from datetime import datetime, timezone

from fastapi import Request

_EXTRA_FIELDS = (
    "user_id", "failure_kind", "path", "method", "status_code", "duration_ms",
)
_HANDLER_NAME = "wordbank"
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

access_logger = logging.getLogger("wordbank.access")


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        line = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        line.update(
            (key, str(record.__dict__[key]))
            for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            line["exception"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


async def log_requests(request: Request, call_next):
    """HTTP middleware: one access line per request, including failed ones."""
    started = time.perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        access_logger.info(
            f"{request.method} {request.url.path} {status_code}",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
