"""
Logs Module

Provides:
- Logging configuration for the relay (console + rotating files)
- Provider request/response logging with latency
- Request id tracking across async tasks
"""

from .logging_config import (
    setup_relay_logging,
    get_provider_logger,
    log_provider_request,
    log_provider_response,
    preview,
    RequestContext,
    RequestIdFilter,
    get_request_id,
    generate_request_id,
    LOG_DIR,
)

__all__ = [
    "setup_relay_logging",
    "get_provider_logger",
    "log_provider_request",
    "log_provider_response",
    "preview",
    "RequestContext",
    "RequestIdFilter",
    "get_request_id",
    "generate_request_id",
    "LOG_DIR",
]
