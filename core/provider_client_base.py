"""
Base Provider Client

Provides shared HTTP client functionality for the third-party providers
the relay talks to (refinement and translation).
Each provider module creates its own instance with its own configuration.

Features:
- Module-specific configuration (name, URL, timeout, pool size)
- Connection pooling per instance
- Request/response logging with latency
- Transport errors normalized to ProviderError

Usage:
    # In a provider module's client
    from core.provider_client_base import BaseProviderClient, ProviderConfig

    config = ProviderConfig(
        name="mymemory",
        base_url="https://api.mymemory.translated.net/get",
    )

    client = BaseProviderClient(config)
    status, data = await client.get_json(config.base_url, params={"q": "hola"})
"""

import time
import asyncio
import json
import aiohttp
from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple

from logs.logging_config import (
    get_provider_logger,
    log_provider_request,
    log_provider_response,
    preview,
)
from .exceptions import ProviderError

logger = get_provider_logger()


@dataclass
class ProviderConfig:
    """
    Configuration for a provider client instance.

    Example:
        # Refinement - every call bounded to 10 seconds
        gemini_config = ProviderConfig(
            name="gemini",
            base_url="https://generativelanguage.googleapis.com/v1beta",
            timeout=10,
        )

        # Translation - no timeout
        mymemory_config = ProviderConfig(
            name="mymemory",
            base_url="https://api.mymemory.translated.net/get",
            timeout=None,
        )
    """
    # Logging identifier
    name: str = "provider"

    base_url: str = ""

    # Connection settings (timeout in seconds, None = wait indefinitely)
    timeout: Optional[float] = None
    pool_limit: int = 50

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "name": self.name,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "pool_limit": self.pool_limit,
        }


class BaseProviderClient:
    """
    Base HTTP client with shared logic for provider calls.

    Each provider creates its OWN INSTANCE with its OWN CONFIGURATION,
    so each one keeps an independent connection pool and timeout.

    Subclasses add the provider-specific request shape and response
    extraction on top of get_json/post_json.
    """

    def __init__(self, config: ProviderConfig):
        """
        Initialize provider client.

        Args:
            config: ProviderConfig with name, URL, and connection settings
        """
        self.config = config
        self._session: Optional[aiohttp.ClientSession] = None

        logger.debug(
            f"[{config.name.upper()}] Initialized | "
            f"url={config.base_url} | timeout={config.timeout}"
        )

    async def get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session for this instance."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            connector = aiohttp.TCPConnector(
                limit=self.config.pool_limit,
                limit_per_host=self.config.pool_limit
            )
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                connector=connector
            )
            logger.debug(f"[{self.config.name.upper()}] Session created")
        return self._session

    async def close(self):
        """Close this instance's session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None
            logger.debug(f"[{self.config.name.upper()}] Session closed")

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, str]] = None,
    ) -> Tuple[int, Any]:
        """
        GET a JSON document.

        Returns:
            Tuple of (HTTP status, decoded body)

        Raises:
            ProviderError: On timeout, connection failure or an undecodable body
        """
        return await self._request("GET", url, params=params)

    async def post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        params: Optional[Dict[str, str]] = None,
    ) -> Tuple[int, Any]:
        """
        POST a JSON payload and decode the JSON answer.

        Non-2xx answers are returned, not raised; the caller decides what
        a failed status means. A body that is not JSON is returned as text.

        Raises:
            ProviderError: On timeout or connection failure
        """
        return await self._request("POST", url, params=params, payload=payload)

    async def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Tuple[int, Any]:
        name = self.config.name
        log_provider_request(
            name,
            method,
            url,
            json.dumps(payload if payload is not None else params or {}, ensure_ascii=False),
        )
        start_time = time.time()

        try:
            session = await self.get_session()
            async with session.request(method, url, params=params, json=payload) as r:
                status = r.status
                raw = await r.text()

        except asyncio.TimeoutError:
            latency_ms = (time.time() - start_time) * 1000
            log_provider_response(name, "timeout", latency_ms, error_message="timed out")
            raise ProviderError(
                name, f"{name.title()} request timed out after {self.config.timeout}s"
            )

        except aiohttp.ClientError as e:
            latency_ms = (time.time() - start_time) * 1000
            log_provider_response(name, "error", latency_ms, error_message=str(e))
            raise ProviderError(name, f"{name.title()} service unavailable: {e}")

        latency_ms = (time.time() - start_time) * 1000
        ok = 200 <= status < 300

        try:
            body = json.loads(raw) if raw else None
        except ValueError as e:
            if ok:
                log_provider_response(name, "invalid_json", latency_ms, error_message=str(e))
                raise ProviderError(
                    name, f"{name.title()} returned an invalid response: {e}", status=status
                )
            body = raw

        if ok:
            log_provider_response(name, "success", latency_ms, raw)
        else:
            log_provider_response(name, f"http_{status}", latency_ms, error_message=preview(raw))
        return status, body

    def get_backend_info(self) -> Dict[str, Any]:
        """Get information about this client's configuration."""
        return self.config.to_dict()
