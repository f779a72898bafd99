"""
Application logging.

Loggers returned by get_logger() take structured data as keyword arguments:

    logger = get_logger(__name__)
    logger.info("Asset updated", asset_id=asset_id, agreement_id=agreement_id)

The data travels on the record as ``extra_data``. Production writes one JSON
object per line; development writes coloured, human-readable lines. Both
show the request ID stamped by CorrelationIdFilter.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from shared.config.settings import settings


def _request_id(record: logging.LogRecord) -> str | None:
    value = getattr(record, "request_id", None)
    return value if value and value != "-" else None


class StructuredFormatter(logging.Formatter):
    """One JSON document per record, for log shippers."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": settings.service_name,
            "message": record.getMessage(),
        }
        if request_id := _request_id(record):
            entry["request_id"] = request_id
        if data := getattr(record, "extra_data", None):
            entry["data"] = data
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        if settings.debug:
            entry["source"] = f"{record.pathname}:{record.lineno}"

        return json.dumps(entry, default=str)


class DevelopmentFormatter(logging.Formatter):
    """Coloured single-line output for a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"
    DIM = "\033[2m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        clock = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        parts = [f"{color}{clock} {record.levelname:<8}{self.RESET}"]

        if request_id := _request_id(record):
            parts.append(f"{self.DIM}[{request_id[:8]}]{self.RESET}")
        parts.append(f"{record.name}: {record.getMessage()}")

        if data := getattr(record, "extra_data", None):
            parts.append("(" + ", ".join(f"{key}={value}" for key, value in data.items()) + ")")

        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class StructuredLogger(logging.Logger):
    """Logger whose level methods accept arbitrary keyword data."""

    def _log(
        self,
        level: int,
        msg: object,
        args: Any,
        exc_info: Any = None,
        extra: dict[str, Any] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
        **data: Any,
    ) -> None:
        extra = dict(extra or {})
        extra["extra_data"] = data or None
        super()._log(
            level,
            msg,
            args,
            exc_info=exc_info,
            extra=extra,
            stack_info=stack_info,
            stacklevel=stacklevel + 1,
        )


logging.setLoggerClass(StructuredLogger)

# Third-party loggers and the level they are held at
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}


def build_formatter() -> logging.Formatter:
    """LOG_FORMAT wins; otherwise JSON in production and text elsewhere."""
    log_format = settings.log_format or ("json" if settings.environment == "production" else "text")
    return StructuredFormatter() if log_format == "json" else DevelopmentFormatter()


class AppLogHandler(logging.StreamHandler):
    """stdout handler installed by setup_logging()."""


def setup_logging() -> None:
    """Install the stdout handler on the root logger, replacing an earlier one."""
    from shared.infrastructure.correlation import CorrelationIdFilter

    level = logging.DEBUG if settings.debug else logging.INFO

    handler = AppLogHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(build_formatter())

    root = logging.getLogger()
    root.handlers[:] = [h for h in root.handlers if not isinstance(h, AppLogHandler)] + [handler]
    root.setLevel(level)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.sql_echo else logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    return logging.getLogger(name)  # type: ignore[return-value]


rest_api_logger = get_logger("asset_finance_api")
