"""
Pytest configuration and shared fixtures for relay tests.
"""
import os
import sys
import pytest
from unittest.mock import AsyncMock, MagicMock

# Keep test runs from writing rotating log files
os.environ.setdefault("LOG_TO_FILE", "false")

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import RelaySettings  # noqa: E402


@pytest.fixture
def settings():
    """Settings with Gemini refinement enabled."""
    return RelaySettings(ai_provider="gemini", gemini_api_key="test-key")


@pytest.fixture
def settings_no_key():
    """Settings with the gemini provider selected but no credential."""
    return RelaySettings(ai_provider="gemini", gemini_api_key=None)


@pytest.fixture
def settings_disabled():
    """Settings with refinement switched off process-wide."""
    return RelaySettings(ai_provider="none", gemini_api_key="test-key")


def make_http_session(status=200, body="{}"):
    """Fake aiohttp session whose request() yields one canned response."""
    response = MagicMock()
    response.status = status
    response.text = AsyncMock(return_value=body)

    session = MagicMock()
    session.request.return_value.__aenter__.return_value = response
    session.request.return_value.__aexit__.return_value = False
    return session



@pytest.fixture
def mock_mymemory():
    """MyMemory client double: lookup() answers per langpair."""
    client = MagicMock()
    client.close = AsyncMock()
    client.get_backend_info.return_value = {"name": "mymemory", "timeout": None}
    client.lookup = AsyncMock(return_value={
        "responseData": {"translatedText": "hello"},
        "responseMetadata": {"detectedLanguage": "es"},
    })
    return client


@pytest.fixture
def mock_gemini():
    """Gemini client double with a key configured."""
    client = MagicMock()
    client.enabled = True
    client.close = AsyncMock()
    client.get_backend_info.return_value = {"name": "gemini", "timeout": 10.0}
    client.generate = AsyncMock(return_value="Hola, ¿cómo está?")
    return client
