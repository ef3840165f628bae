"""
Core translation logic using MyMemory.
"""
import logging
from typing import Any, Dict

from core import ProviderError, DetectionAmbiguous, TranslationFieldMissing
from logs.logging_config import preview
from .config import (
    TRANSLATION_DETECTION_PROBE_PAIR,
    TRANSLATION_FALLBACK_LANGUAGE,
    TRANSLATION_UNSUPPORTED_PAIR_MARKER,
    TRANSLATION_MISSING_MARKER,
)
from .mymemory_client import MyMemoryClient

logger = logging.getLogger(__name__)


def extract_detected_language(data: Dict[str, Any]) -> str:
    """
    Read the detected source language from a probe response.

    Raises:
        DetectionAmbiguous: If the provider refused the pair or reported no language
    """
    details = data.get("responseDetails")
    if isinstance(details, str) and TRANSLATION_UNSUPPORTED_PAIR_MARKER in details:
        raise DetectionAmbiguous("mymemory", f"Probe pair rejected: {details}")

    metadata = data.get("responseMetadata")
    detected = metadata.get("detectedLanguage") if isinstance(metadata, dict) else None
    if not detected or not isinstance(detected, str):
        raise DetectionAmbiguous("mymemory", "No detected language in probe response")
    return detected


def extract_translated_text(data: Dict[str, Any]) -> str:
    """
    Read responseData.translatedText from a translation response.

    Raises:
        TranslationFieldMissing: If the field is absent or empty
    """
    response_data = data.get("responseData")
    translated = response_data.get("translatedText") if isinstance(response_data, dict) else None
    if not translated or not isinstance(translated, str):
        raise TranslationFieldMissing("Translation response has no responseData.translatedText")
    return translated


class Translator:
    """Translator class using MyMemory for detection and translation."""

    def __init__(self, client: MyMemoryClient, fallback_language: str = TRANSLATION_FALLBACK_LANGUAGE):
        """
        Initialize the translator.

        Args:
            client: MyMemory client
            fallback_language: Source code used when detection is inconclusive
        """
        self.client = client
        self.fallback_language = fallback_language

    async def close(self):
        await self.client.close()

    async def detect_language(self, text: str) -> str:
        """
        Detect the language of text with a neutral language-pair probe.

        Never raises; an inconclusive or failed probe yields the fallback code.

        Args:
            text: Text to detect

        Returns:
            Detected provider language code
        """
        source, target = TRANSLATION_DETECTION_PROBE_PAIR
        try:
            data = await self.client.lookup(text, source, target)
            detected = extract_detected_language(data)
        except DetectionAmbiguous as e:
            logger.info(f"[DETECT] Inconclusive, using fallback | fallback={self.fallback_language} | reason={e}")
            return self.fallback_language
        except ProviderError as e:
            logger.warning(f"[DETECT] Probe failed, using fallback | fallback={self.fallback_language} | error={e}")
            return self.fallback_language

        logger.info(f"[DETECT] Detected source language: {detected}")
        return detected

    async def translate(self, text: str, source_code: str, target_code: str) -> str:
        """
        Translate text between two provider language codes.

        Args:
            text: Text to translate
            source_code: Source language code
            target_code: Target language code

        Returns:
            Translated text, or the missing-translation marker

        Raises:
            ProviderError: If the provider cannot be reached
        """
        logger.info(f"[TRANSLATOR] Translating {len(text)} chars | langpair={source_code}|{target_code}")

        data = await self.client.lookup(text, source_code, target_code)

        try:
            translated = extract_translated_text(data)
        except TranslationFieldMissing as e:
            logger.warning(f"[TRANSLATOR] {e} | response={preview(str(data))}")
            return TRANSLATION_MISSING_MARKER

        logger.info(f"[TRANSLATOR] Translation complete | output_chars={len(translated)}")
        return translated
