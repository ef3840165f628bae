"""
Core Module

Shared infrastructure components for all modules:
- Provider HTTP client base class
- Relay error taxonomy
- Validators
"""

from .provider_client_base import BaseProviderClient, ProviderConfig
from .exceptions import (
    RelayError,
    BadRequest,
    ProviderError,
    RefinementFailure,
    DetectionAmbiguous,
    TranslationFieldMissing,
    UnhandledFailure,
)
from .validators import (
    validate_required_fields,
)

__all__ = [
    "BaseProviderClient",
    "ProviderConfig",
    "RelayError",
    "BadRequest",
    "ProviderError",
    "RefinementFailure",
    "DetectionAmbiguous",
    "TranslationFieldMissing",
    "UnhandledFailure",
    "validate_required_fields",
]
