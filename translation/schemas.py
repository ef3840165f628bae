"""
Pydantic schemas for translation API.
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, Dict


class TranslationRequest(BaseModel):
    """
    Request for text translation.

    text and target are optional at the schema level so that a missing
    field is reported by the relay as a 400, not as a validation error.
    """
    text: Optional[str] = Field(None, description="Text to translate")
    target: Optional[str] = Field(None, description="Target language name or code")
    source: Optional[str] = Field(None, description="Source language name or code (detected if not provided)")
    # Any JSON value; only a literal false skips refinement
    refine: Any = Field(True, description="Polish the text with AI before translating (false to skip)")


class TranslationResponse(BaseModel):
    """Response from translation."""
    translation: str = Field(..., description="Translated text")


class ErrorResponse(BaseModel):
    """Error body for 4xx/5xx responses."""
    error: str = Field(..., description="Error message")


class AIStatusResponse(BaseModel):
    """AI refinement provider status."""
    model_config = ConfigDict(populate_by_name=True)

    provider: str = Field(..., description="Configured AI provider")
    gemini_enabled: bool = Field(..., alias="geminiEnabled", description="Whether a Gemini key is configured")


class PingResponse(AIStatusResponse):
    """Lightweight health check."""
    ok: bool = Field(True, description="Always true when the relay is up")


class LanguagesResponse(BaseModel):
    """Known language names and their provider codes."""
    languages: Dict[str, str] = Field(..., description="Language name to code")
