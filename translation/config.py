"""
Translation Configuration

Module-specific settings for text translation.
"""
import os

# =========================
# MyMemory Backend Configuration
# =========================

MYMEMORY_URL = os.getenv("MYMEMORY_URL", "https://api.mymemory.translated.net/get")

# =========================
# Detection Settings
# =========================

# Language pair sent with the detection probe
TRANSLATION_DETECTION_PROBE_PAIR = ("en", "en")

# Source code used when the probe cannot tell the language
TRANSLATION_FALLBACK_LANGUAGE = os.getenv("TRANSLATION_FALLBACK_LANGUAGE", "en")

# responseDetails text MyMemory sends for a pair it refuses
TRANSLATION_UNSUPPORTED_PAIR_MARKER = "Language pair not supported"

# =========================
# Translation Settings
# =========================

# Returned in place of a translation when the provider sends none
TRANSLATION_MISSING_MARKER = "Error: no translation"

# =========================
# Connection Settings
# =========================

# Seconds; 0 waits indefinitely
TRANSLATION_CONNECTION_TIMEOUT = os.getenv("TRANSLATION_CONNECTION_TIMEOUT", "0")
TRANSLATION_CONNECTION_POOL_LIMIT = int(os.getenv("TRANSLATION_CONNECTION_POOL_LIMIT", "50"))
