"""
Translation relay dispatcher.

Validates a request, optionally refines the text, resolves language
codes and hands the text to the translator.
"""
import logging

from config import RelaySettings
from core import validate_required_fields
from logs.logging_config import preview
from refinement import Refiner
from .languages import resolve_language_code
from .schemas import TranslationRequest, TranslationResponse
from .translator import Translator

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing text or target"


class TranslationRelay:
    """Request dispatcher between the client and the two providers."""

    def __init__(self, settings: RelaySettings, refiner: Refiner, translator: Translator):
        self.settings = settings
        self.refiner = refiner
        self.translator = translator

    async def close(self):
        """Close provider sessions. Call this on application shutdown."""
        await self.refiner.close()
        await self.translator.close()

    def provider_info(self) -> dict:
        """Connection settings of both provider clients."""
        gemini = self.refiner.gemini
        return {
            "refinement": gemini.get_backend_info() if gemini is not None else None,
            "translation": self.translator.client.get_backend_info(),
        }

    def should_refine(self, request: TranslationRequest) -> bool:
        """Refine unless disabled process-wide or the client sent refine=false."""
        return self.settings.refinement_enabled and request.refine is not False

    async def refine_text(self, request: TranslationRequest) -> str:
        language = request.source or self.settings.default_source_language
        try:
            result = await self.refiner.refine(request.text, language)
        except Exception as e:
            logger.error(f"[RELAY] Original text refinement failed, using raw text | error={e}")
            return request.text

        if result.refined:
            logger.info(f"[RELAY] Using refined original text: {preview(result.refined_text)}")
        return result.refined_text

    async def resolve_source(self, request: TranslationRequest, text: str) -> str:
        if request.source:
            source_code = resolve_language_code(request.source)
            logger.info(f"[RELAY] Using client-provided source language: {request.source} -> {source_code}")
            return source_code
        return await self.translator.detect_language(text)

    async def relay(self, request: TranslationRequest) -> TranslationResponse:
        """
        Run the full pipeline for one request.

        Args:
            request: Incoming translation request

        Returns:
            TranslationResponse with the translated text

        Raises:
            BadRequest: If text or target is missing
            ProviderError: If the translation provider cannot be reached
        """
        validate_required_fields(request.text, request.target, message=MISSING_FIELDS_MESSAGE)

        logger.info(f'[RELAY] Translating "{preview(request.text)}" to {request.target}')

        text = request.text
        if self.should_refine(request):
            text = await self.refine_text(request)

        target_code = resolve_language_code(request.target)
        source_code = await self.resolve_source(request, text)

        translation = await self.translator.translate(text, source_code, target_code)
        return TranslationResponse(translation=translation)
