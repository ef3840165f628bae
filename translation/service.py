"""
Translation Service

FastAPI endpoints for the translation relay.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from config import RelaySettings
from core import BadRequest, UnhandledFailure
from .languages import supported_languages
from .relay import TranslationRelay
from .schemas import (
    TranslationRequest,
    TranslationResponse,
    ErrorResponse,
    AIStatusResponse,
    PingResponse,
    LanguagesResponse,
)

logger = logging.getLogger(__name__)


def get_relay(request: Request) -> TranslationRelay:
    """Relay built at startup (see main.create_app)."""
    return request.app.state.relay


def get_relay_settings(request: Request) -> RelaySettings:
    return request.app.state.settings


# Create router
router = APIRouter(tags=["Translation"])


# =====================
# API Endpoints
# =====================

@router.post(
    "/translate",
    response_model=TranslationResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def translate_endpoint(
    request: TranslationRequest,
    relay: TranslationRelay = Depends(get_relay),
):
    """
    Translate text, optionally refining it with AI first.

    **Request Body:**
    - `text`: Text to translate (required)
    - `target`: Target language name or code (required)
    - `source`: Source language name or code (detected if not provided)
    - `refine`: Set to false to skip AI refinement (default true)

    **Returns:**
    - `translation`: Translated text
    """
    logger.info(
        f"[TRANSLATE] START | chars={len(request.text or '')} | "
        f"target={request.target} | source={request.source} | refine={request.refine}"
    )

    try:
        response = await relay.relay(request)

    except BadRequest as e:
        logger.warning(f"[TRANSLATE] REJECTED | error={e}")
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logger.exception(f"[TRANSLATE] ERROR | error={e}")
        raise UnhandledFailure(f"Translation failed: {str(e)}") from e

    logger.info(f"[TRANSLATE] END | output_chars={len(response.translation)}")
    return response


@router.api_route("/ai-status", methods=["GET", "POST"], response_model=AIStatusResponse)
async def ai_status_endpoint(settings: RelaySettings = Depends(get_relay_settings)):
    """
    Report which AI provider is configured and whether it has a key.

    Accepts both GET and POST.
    """
    return AIStatusResponse(provider=settings.ai_provider, gemini_enabled=settings.gemini_enabled)


@router.get("/ping", response_model=PingResponse)
async def ping_endpoint(settings: RelaySettings = Depends(get_relay_settings)):
    """Lightweight diagnostic endpoint for quick health checks."""
    return PingResponse(ok=True, provider=settings.ai_provider, gemini_enabled=settings.gemini_enabled)


@router.get("/languages", response_model=LanguagesResponse)
async def languages_endpoint():
    """List the language names the relay maps to provider codes."""
    return LanguagesResponse(languages=supported_languages())


@router.get("/config")
async def get_relay_config(relay: TranslationRelay = Depends(get_relay)):
    """
    Get the active relay configuration.

    **Returns:**
    - Provider selection, timeouts and fallback code (no credentials)
    - `providers`: Connection settings of the refinement and translation clients
    """
    return {**relay.settings.to_dict(), "providers": relay.provider_info()}
