"""
Relay Errors

Error taxonomy shared by the dispatcher, the provider clients and the
HTTP layer. Only BadRequest and unhandled errors ever reach the client;
the provider failures below are recovered where they are raised.
"""


class RelayError(Exception):
    """Base class for all relay errors."""


class BadRequest(RelayError):
    """Required request input is missing. Reported as HTTP 400."""


class ProviderError(RelayError):
    """A third-party provider call failed (transport, status or body)."""

    def __init__(self, provider: str, message: str, status: int = None):
        self.provider = provider
        self.status = status
        super().__init__(message)


class RefinementFailure(ProviderError):
    """The optional refinement step failed; the original text is used."""


class DetectionAmbiguous(ProviderError):
    """The detection probe could not determine a source language."""


class TranslationFieldMissing(RelayError):
    """The translation provider response has no translated text."""


class UnhandledFailure(RelayError):
    """Any other failure in the pipeline. Reported as HTTP 500."""
