"""Exceptions raised by the receipt extraction pipeline."""

from __future__ import annotations


class ReceiptParseError(Exception):
    """Base class for pipeline-level failures."""


class ConfigurationError(ReceiptParseError):
    """Inference credentials are missing or invalid."""


class UpstreamUnavailable(ReceiptParseError):
    """The inference service stayed rate-limited after every retry."""

    def __init__(self, message: str, attempts: int = 0) -> None:
        super().__init__(message)
        self.attempts = attempts


class EmptyResponse(ReceiptParseError):
    """No text could be extracted from the inference response."""


class MalformedResponse(ReceiptParseError):
    """The response text held no parseable JSON object."""
