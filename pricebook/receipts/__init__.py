"""Receipt image parsing for grocery price tracking."""

from .config import (
    GeminiConfig,
    InferenceConfig,
    ReceiptConfig,
    ReceiptsConfig,
    RetryConfig,
    load_config,
)
from .errors import (
    ConfigurationError,
    EmptyResponse,
    MalformedResponse,
    ReceiptParseError,
    UpstreamUnavailable,
)
from .inference import InferenceClient, create_client
from .mime import sniff_mime_type
from .models import ParsedReceipt, ParsedReceiptItem
from .pipeline import ReceiptPipeline, create_pipeline

__all__ = [
    "ReceiptPipeline",
    "create_pipeline",
    "InferenceClient",
    "create_client",
    "ParsedReceipt",
    "ParsedReceiptItem",
    "sniff_mime_type",
    "ReceiptParseError",
    "ConfigurationError",
    "UpstreamUnavailable",
    "EmptyResponse",
    "MalformedResponse",
    "ReceiptsConfig",
    "InferenceConfig",
    "GeminiConfig",
    "RetryConfig",
    "ReceiptConfig",
    "load_config",
]
