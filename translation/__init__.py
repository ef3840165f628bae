"""
Translation Service Module

Relays text to the MyMemory translation provider, with optional
AI refinement beforehand.
"""

from .service import router
from .relay import TranslationRelay
from .translator import Translator
from .mymemory_client import MyMemoryClient
from .languages import LANGUAGE_CODES, resolve_language_code

__all__ = [
    "router",
    "TranslationRelay",
    "Translator",
    "MyMemoryClient",
    "LANGUAGE_CODES",
    "resolve_language_code",
]
