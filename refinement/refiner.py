"""
Core refinement logic.

Refinement is best effort: the Refiner always hands back usable text,
falling back to the caller's original text whenever the provider is
disabled, unreachable or answers with something unexpected.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from core import RefinementFailure
from logs.logging_config import preview
from .gemini_client import GeminiClient
from .prompts import get_refinement_prompt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefinementResult:
    """Outcome of a refinement attempt."""
    refined_text: str
    refined: bool = False
    reason: Optional[str] = None

    @classmethod
    def unchanged(cls, text: str, reason: str) -> "RefinementResult":
        return cls(refined_text=text, refined=False, reason=reason)


class Refiner:
    """Dispatches refinement to the configured AI provider."""

    def __init__(self, provider: str, gemini: Optional[GeminiClient] = None):
        """
        Args:
            provider: Configured AI provider ("gemini" or "none")
            gemini: Gemini client, required for the "gemini" provider
        """
        self.provider = provider
        self.gemini = gemini

    async def refine(self, text: str, language: str) -> RefinementResult:
        """
        Polish text with the configured provider.

        Never raises; any failure yields the original text.

        Args:
            text: Text to refine
            language: Human-readable language name of the text

        Returns:
            RefinementResult carrying the text to translate
        """
        logger.info(f"[REFINE] Refining original text | provider={self.provider} | language={language}")

        if self.provider != "gemini":
            logger.info("[REFINE] Refinement disabled or unsupported provider, returning original text")
            return RefinementResult.unchanged(text, "provider_disabled")

        if self.gemini is None or not self.gemini.enabled:
            logger.info("[REFINE] No Gemini key provided, skipping refinement")
            return RefinementResult.unchanged(text, "no_credential")

        try:
            refined = await self.gemini.generate(get_refinement_prompt(text, language))
        except RefinementFailure as e:
            logger.warning(f"[REFINE] Refinement failed, using raw text | error={e}")
            return RefinementResult.unchanged(text, str(e))

        if not refined or not refined.strip():
            logger.warning("[REFINE] Gemini response had no text, using trimmed raw text")
            return RefinementResult.unchanged(text.strip(), "empty_response")

        refined = refined.strip()
        logger.info(f"[REFINE] Refined text | chars={len(refined)} | text={preview(refined)}")
        return RefinementResult(refined_text=refined, refined=True)

    async def close(self):
        if self.gemini is not None:
            await self.gemini.close()
