"""
Global Configuration

Shared settings used across all modules.
Module-specific settings are in each module's config.py file.

All settings can be overridden via environment variables or a .env file.
See .env.example for a complete list of configurable variables.
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

# Load .env file before any os.getenv() calls
load_dotenv()

# =========================
# AI Refinement Configuration
# =========================

# Accepted values: "gemini" or "none"
AI_PROVIDER = os.getenv("AI_PROVIDER", "gemini")
GOOGLE_GEMINI_KEY = os.getenv("GOOGLE_GEMINI_KEY")

# =========================
# Server Configuration
# =========================

RELAY_HOST = os.getenv("RELAY_HOST", "0.0.0.0")
RELAY_PORT = int(os.getenv("RELAY_PORT", "3000"))
RELAY_CORS_ORIGINS = os.getenv("RELAY_CORS_ORIGINS", "*")


def _split_origins(raw: str) -> Tuple[str, ...]:
    return tuple(o.strip() for o in raw.split(",") if o.strip()) or ("*",)


def _optional_timeout(raw: str) -> Optional[float]:
    """Parse a timeout in seconds; 0 or empty means no timeout."""
    value = float(raw or 0)
    return value if value > 0 else None


@dataclass(frozen=True)
class RelaySettings:
    """
    Immutable relay configuration.

    Built once at startup (see main.create_app) and handed to the
    dispatcher and provider clients. Nothing reads provider toggles
    from module globals while serving a request.
    """
    ai_provider: str = "gemini"
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-pro"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    refinement_timeout: float = 10.0
    default_source_language: str = "English"

    mymemory_url: str = "https://api.mymemory.translated.net/get"
    translation_timeout: Optional[float] = None
    fallback_language_code: str = "en"

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: Tuple[str, ...] = field(default_factory=lambda: ("*",))

    @property
    def gemini_enabled(self) -> bool:
        """True when a Gemini credential is configured."""
        return bool(self.gemini_api_key)

    @property
    def refinement_enabled(self) -> bool:
        """Process-wide refinement toggle."""
        return self.ai_provider != "none"

    @classmethod
    def from_env(cls) -> "RelaySettings":
        """
        Build settings from the current environment (and .env).

        Every variable is read again at call time; the module-level
        constants only supply the defaults.
        """
        # Module-specific defaults live beside the modules that use them
        from refinement.config import (
            GEMINI_MODEL,
            GEMINI_BASE_URL,
            REFINEMENT_TIMEOUT,
            REFINEMENT_DEFAULT_LANGUAGE,
        )
        from translation.config import (
            MYMEMORY_URL,
            TRANSLATION_CONNECTION_TIMEOUT,
            TRANSLATION_FALLBACK_LANGUAGE,
        )

        return cls(
            ai_provider=os.getenv("AI_PROVIDER", AI_PROVIDER),
            gemini_api_key=os.getenv("GOOGLE_GEMINI_KEY", GOOGLE_GEMINI_KEY) or None,
            gemini_model=os.getenv("GEMINI_MODEL", GEMINI_MODEL),
            gemini_base_url=os.getenv("GEMINI_BASE_URL", GEMINI_BASE_URL),
            refinement_timeout=float(os.getenv("REFINEMENT_TIMEOUT", REFINEMENT_TIMEOUT)),
            default_source_language=os.getenv("REFINEMENT_DEFAULT_LANGUAGE", REFINEMENT_DEFAULT_LANGUAGE),
            mymemory_url=os.getenv("MYMEMORY_URL", MYMEMORY_URL),
            translation_timeout=_optional_timeout(
                os.getenv("TRANSLATION_CONNECTION_TIMEOUT", TRANSLATION_CONNECTION_TIMEOUT)
            ),
            fallback_language_code=os.getenv("TRANSLATION_FALLBACK_LANGUAGE", TRANSLATION_FALLBACK_LANGUAGE),
            host=os.getenv("RELAY_HOST", RELAY_HOST),
            port=int(os.getenv("RELAY_PORT", RELAY_PORT)),
            cors_origins=_split_origins(os.getenv("RELAY_CORS_ORIGINS", RELAY_CORS_ORIGINS)),
        )

    def to_dict(self) -> dict:
        """Convert settings to a dictionary with the credential masked."""
        return {
            "ai_provider": self.ai_provider,
            "gemini_enabled": self.gemini_enabled,
            "gemini_model": self.gemini_model,
            "refinement_timeout": self.refinement_timeout,
            "mymemory_url": self.mymemory_url,
            "translation_timeout": self.translation_timeout,
            "fallback_language_code": self.fallback_language_code,
        }


@lru_cache(maxsize=1)
def get_settings() -> RelaySettings:
    """Get the process-wide settings (cached)."""
    return RelaySettings.from_env()
