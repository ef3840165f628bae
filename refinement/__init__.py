"""
Refinement Module

Provides optional AI clean-up of text before translation.
"""

from .gemini_client import GeminiClient, extract_candidate_text
from .refiner import Refiner, RefinementResult
from .prompts import get_refinement_prompt

__all__ = [
    "GeminiClient",
    "extract_candidate_text",
    "Refiner",
    "RefinementResult",
    "get_refinement_prompt",
]
