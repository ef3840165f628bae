"""
Logging setup for the relay.

Console output plus rotating request/error log files. Every record carries
the id of the HTTP request it belongs to, tracked in a ContextVar so
concurrent requests on the same event loop don't mix.
"""
import logging
import uuid
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import (
    LOG_OUTPUT_DIR,
    LOG_TO_FILE,
    LOG_LEVEL,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
    LOG_PREVIEW_LENGTH,
    LOG_DATE_FORMAT,
    LOG_DETAILED_FORMAT,
    LOG_SIMPLE_FORMAT,
    LOG_FILE_REQUESTS,
    LOG_FILE_ERRORS,
)

LOG_DIR = Path(LOG_OUTPUT_DIR)

PROVIDER_LOGGER_NAME = "relay.provider"

_request_id: ContextVar[str] = ContextVar("request_id", default="-")

_configured = False


# =========================
# Request Context
# =========================

def generate_request_id() -> str:
    return str(uuid.uuid4())


def get_request_id() -> str:
    return _request_id.get()


class RequestContext:
    """
    Context manager binding a request id for the duration of a block.

    Example:
        with RequestContext() as request_id:
            logger.info("handled")  # record carries request_id
    """

    def __init__(self, request_id: Optional[str] = None):
        self.request_id = request_id or generate_request_id()
        self._token = None

    def __enter__(self) -> str:
        self._token = _request_id.set(self.request_id)
        return self.request_id

    def __exit__(self, exc_type, exc, tb):
        _request_id.reset(self._token)
        return False


class RequestIdFilter(logging.Filter):
    """Attach the current request id to every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = get_request_id()
        return True


# =========================
# Setup
# =========================

def setup_relay_logging(level: Optional[str] = None, to_file: Optional[bool] = None) -> logging.Logger:
    """
    Configure root logging for the relay. Safe to call more than once.

    Args:
        level: Log level name (defaults to LOG_LEVEL)
        to_file: Also write rotating log files (defaults to LOG_TO_FILE)

    Returns:
        The root logger
    """
    global _configured
    root = logging.getLogger()
    if _configured:
        return root

    level = (level or LOG_LEVEL).upper()
    to_file = LOG_TO_FILE if to_file is None else to_file
    root.setLevel(level)

    request_filter = RequestIdFilter()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_SIMPLE_FORMAT, LOG_DATE_FORMAT))
    console.addFilter(request_filter)
    root.addHandler(console)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        detailed = logging.Formatter(LOG_DETAILED_FORMAT, LOG_DATE_FORMAT)

        requests_handler = RotatingFileHandler(
            LOG_DIR / LOG_FILE_REQUESTS,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        requests_handler.setFormatter(detailed)
        requests_handler.addFilter(request_filter)
        root.addHandler(requests_handler)

        errors_handler = RotatingFileHandler(
            LOG_DIR / LOG_FILE_ERRORS,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        errors_handler.setLevel(logging.ERROR)
        errors_handler.setFormatter(detailed)
        errors_handler.addFilter(request_filter)
        root.addHandler(errors_handler)

    _configured = True
    root.debug(f"[LOGGING] Configured | level={level} | to_file={to_file} | dir={LOG_DIR}")
    return root


def get_provider_logger() -> logging.Logger:
    """Logger shared by all provider clients."""
    return logging.getLogger(PROVIDER_LOGGER_NAME)


# =========================
# Provider Call Logging
# =========================

def preview(text: Optional[str], length: int = LOG_PREVIEW_LENGTH) -> str:
    """Shorten text for log output."""
    if not text:
        return ""
    text = text.replace("\n", " ")
    if len(text) <= length:
        return text
    return text[:length] + "..."


def log_provider_request(provider: str, method: str, url: str, payload_preview: str = "") -> None:
    get_provider_logger().info(
        f"[{provider.upper()}] REQUEST | method={method} | url={url} | "
        f"payload={preview(payload_preview)}"
    )


def log_provider_response(
    provider: str,
    status: str,
    latency_ms: float,
    response_preview: str = "",
    error_message: Optional[str] = None,
) -> None:
    logger = get_provider_logger()
    if status == "success":
        logger.info(
            f"[{provider.upper()}] RESPONSE | status={status} | "
            f"latency_ms={latency_ms:.1f} | response={preview(response_preview)}"
        )
    else:
        logger.error(
            f"[{provider.upper()}] RESPONSE | status={status} | "
            f"latency_ms={latency_ms:.1f} | error={error_message}"
        )
