"""
Translation Relay Application

FastAPI app wiring: settings, provider clients, CORS, request logging
and JSON error bodies. Run with `python main.py` or
`uvicorn main:app --host 0.0.0.0 --port 3000`.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import RelaySettings, get_settings
from core import UnhandledFailure
from logs import setup_relay_logging, RequestContext
from refinement import GeminiClient, Refiner
from translation import router as translation_router
from translation import MyMemoryClient, Translator, TranslationRelay

logger = logging.getLogger(__name__)


def build_relay(settings: RelaySettings) -> TranslationRelay:
    """Create the dispatcher and its provider clients from settings."""
    gemini = GeminiClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.refinement_timeout,
    )
    translator = Translator(
        MyMemoryClient(url=settings.mymemory_url, timeout=settings.translation_timeout),
        fallback_language=settings.fallback_language_code,
    )
    return TranslationRelay(settings, Refiner(settings.ai_provider, gemini), translator)


def create_app(
    settings: Optional[RelaySettings] = None,
    relay: Optional[TranslationRelay] = None,
) -> FastAPI:
    """
    Build the relay application.

    Args:
        settings: Relay settings (read from the environment if not given)
        relay: Prebuilt dispatcher (built from settings if not given)
    """
    settings = settings or get_settings()
    relay = relay or build_relay(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            f"[STARTUP] AI Provider: {settings.ai_provider} | "
            f"Gemini key present: {settings.gemini_enabled}"
        )
        yield
        await relay.close()
        logger.info("[SHUTDOWN] Provider sessions closed")

    app = FastAPI(title="Translation Relay", lifespan=lifespan)
    app.state.settings = settings
    app.state.relay = relay

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        with RequestContext(request.headers.get("X-Request-ID")) as request_id:
            logger.info(f"[HTTP] {request.method} {request.url.path}")
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(UnhandledFailure)
    async def unhandled_failure_handler(request: Request, exc: UnhandledFailure):
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        logger.warning(f"[HTTP] Invalid request body | errors={errors}")
        return JSONResponse(status_code=400, content={"error": f"Invalid request: {errors}"})

    app.include_router(translation_router)
    return app


setup_relay_logging()
app = create_app()


def run():
    """Console entry point."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
