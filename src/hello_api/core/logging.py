"""
Loguru configuration for the application.

This module configures loguru with:
- Automatic Trace ID in each log
- Human-readable or JSON output, selected by settings
- Redirection of standard library logs to loguru
"""

import json
import logging
import sys
from typing import Any, TextIO

from loguru import logger

from hello_api.config import settings
from hello_api.core.trace_context import trace_id_context

HUMAN_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "trace_id={extra[trace_id]} | {name}:{function}:{line} - {message}"
)
JSON_LOG_FORMAT = "{message}"


def add_trace_id(record: dict[str, Any]) -> bool:
    """
    Adds the trace_id to the log record.

    Args:
        record: Loguru record

    Returns:
        True to indicate that the filter passed
    """
    trace_id = trace_id_context.get()
    record["extra"]["trace_id"] = trace_id if trace_id else "N/A"
    return True


class JsonSink:
    """
    Loguru sink writing one JSON document per log line.

    Used when ``LOG_FORMAT=json`` so that log collectors can parse
    records without a custom grammar.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stderr

    def write(self, message: Any) -> None:
        record = message.record
        payload: dict[str, Any] = {
            "time": record["time"].isoformat(),
            "level": record["level"].name,
            "logger": record["name"],
            "function": record["function"],
            "line": record["line"],
            "message": record["message"],
            "trace_id": record["extra"].get("trace_id", "N/A"),
        }

        exception = record["exception"]
        if exception:
            exc_type, exc_value, _ = exception
            payload["exception"] = {
                "type": exc_type.__name__ if exc_type else None,
                "value": str(exc_value) if exc_value else None,
            }

        self.stream.write(json.dumps(payload, ensure_ascii=False) + "\n")
        self.stream.flush()


def get_log_format() -> str:
    """
    Return the loguru format string matching the configured output.

    Returns:
        Format string for ``logger.add``
    """
    if settings.log_format.lower() == "json":
        return JSON_LOG_FORMAT
    return HUMAN_LOG_FORMAT


def configure_logger() -> None:
    """
    Configures loguru with application settings.

    Removes the default handler and installs a single stderr sink, either
    coloured text or JSON lines depending on ``settings.log_format``.
    """
    logger.remove()

    if settings.log_format.lower() == "json":
        logger.add(
            sink=JsonSink().write,
            level=settings.log_level.upper(),
            format=get_log_format(),
            filter=add_trace_id,
            colorize=False,
        )
        return

    logger.add(
        sink=sys.stderr,
        level=settings.log_level.upper(),
        format=get_log_format(),
        filter=add_trace_id,
        colorize=True,
        serialize=False,
        backtrace=True,
        diagnose=False,
    )


# Configure logger when importing the module
configure_logger()


__all__ = ["logger", "InterceptHandler", "JsonSink", "intercept_standard_logging"]


class InterceptHandler(logging.Handler):
    """
    Handler to redirect standard logging logs to loguru.

    This allows capturing logs from libraries that use standard logging
    (uvicorn, fastapi) and process them with loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """
        Redirects a standard logging record to loguru.

        Args:
            record: logging.LogRecord record
        """
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def intercept_standard_logging() -> None:
    """
    Configures redirection of standard logging to loguru.

    Intercepts logs from uvicorn (server, access, error) and fastapi.
    Call this once at process start, before the listener is created.
    """
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.INFO)

    for logger_name in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "fastapi",
    ]:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False
