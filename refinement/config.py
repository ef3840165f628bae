"""
Refinement Configuration

Module-specific settings for AI text refinement.
"""
import os

# =========================
# Gemini Backend Configuration
# =========================

GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")

GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-pro")

# =========================
# Refinement Settings
# =========================

# Language name used in the prompt when the client gives no source language
REFINEMENT_DEFAULT_LANGUAGE = os.getenv("REFINEMENT_DEFAULT_LANGUAGE", "English")

# =========================
# Connection Settings
# =========================

# Every refinement call is aborted after this many seconds
REFINEMENT_TIMEOUT = float(os.getenv("REFINEMENT_TIMEOUT", "10"))
REFINEMENT_CONNECTION_POOL_LIMIT = int(os.getenv("REFINEMENT_CONNECTION_POOL_LIMIT", "50"))
