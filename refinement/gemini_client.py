"""
Gemini Client

Generative-language client used for refinement.
Uses BaseProviderClient with refinement-specific configuration.
"""
import logging
from typing import Any, Optional

from core import BaseProviderClient, ProviderConfig, ProviderError, RefinementFailure
from .config import (
    GEMINI_BASE_URL,
    GEMINI_MODEL,
    REFINEMENT_TIMEOUT,
    REFINEMENT_CONNECTION_POOL_LIMIT,
)

logger = logging.getLogger(__name__)


def extract_candidate_text(data: Any) -> Optional[str]:
    """
    Pull candidates[0].content.parts[0].text out of a generateContent answer.

    Returns:
        The text, or None if the response has a different shape
    """
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


class GeminiClient(BaseProviderClient):
    """Client for the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_key: Optional[str],
        model: str = GEMINI_MODEL,
        base_url: str = GEMINI_BASE_URL,
        timeout: float = REFINEMENT_TIMEOUT,
    ):
        super().__init__(ProviderConfig(
            name="gemini",
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            pool_limit=REFINEMENT_CONNECTION_POOL_LIMIT,
        ))
        self.api_key = api_key
        self.model = model

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> Optional[str]:
        """
        Send a single-turn prompt to Gemini.

        Args:
            prompt: The prompt text

        Returns:
            The first candidate's text, or None if the answer has no text

        Raises:
            RefinementFailure: On timeout, transport error or non-success status
        """
        payload = {
            "contents": [{
                "parts": [{
                    "text": prompt
                }]
            }]
        }

        try:
            status, data = await self.post_json(
                self.endpoint, payload, params={"key": self.api_key}
            )
        except ProviderError as e:
            raise RefinementFailure("gemini", str(e)) from e

        if not 200 <= status < 300:
            logger.error(f"[GEMINI] API error | status={status} | response={data}")
            raise RefinementFailure("gemini", f"Gemini API returned HTTP {status}", status=status)

        return extract_candidate_text(data)
