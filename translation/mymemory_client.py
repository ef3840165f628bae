"""
MyMemory Client

Translation-provider client used for both the detection probe and the
actual translation. Uses BaseProviderClient with translation-specific
configuration.
"""
import logging
from typing import Any, Dict, Optional

from core import BaseProviderClient, ProviderConfig
from .config import (
    MYMEMORY_URL,
    TRANSLATION_CONNECTION_POOL_LIMIT,
)

logger = logging.getLogger(__name__)


class MyMemoryClient(BaseProviderClient):
    """Client for the MyMemory /get endpoint."""

    def __init__(self, url: str = MYMEMORY_URL, timeout: Optional[float] = None):
        super().__init__(ProviderConfig(
            name="mymemory",
            base_url=url,
            timeout=timeout,
            pool_limit=TRANSLATION_CONNECTION_POOL_LIMIT,
        ))

    async def lookup(self, text: str, source: str, target: str) -> Dict[str, Any]:
        """
        Query MyMemory for a language pair.

        Args:
            text: Query text
            source: Source language code
            target: Target language code

        Returns:
            The decoded response object ({} if the body is not an object)

        Raises:
            ProviderError: On transport failure or an undecodable success body
        """
        status, data = await self.get_json(
            self.config.base_url,
            params={"q": text, "langpair": f"{source}|{target}"},
        )
        if not 200 <= status < 300:
            logger.warning(f"[MYMEMORY] Non-success status | status={status} | langpair={source}|{target}")
        return data if isinstance(data, dict) else {}
