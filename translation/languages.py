"""
Language name to MyMemory code lookup.
"""
from types import MappingProxyType
from typing import Mapping

LANGUAGE_CODES: Mapping[str, str] = MappingProxyType({
    "Spanish": "es",
    "French": "fr",
    "Mandarin": "zh-CN",
    "German": "de",
    "Portuguese": "pt",
    "Italian": "it",
    "Japanese": "ja",
    "English": "en",
})


def resolve_language_code(name: str) -> str:
    """
    Map a language name to its provider code.

    Unknown names are returned unchanged, so callers may pass codes directly.
    """
    return LANGUAGE_CODES.get(name, name)


def supported_languages() -> dict:
    return dict(LANGUAGE_CODES)
