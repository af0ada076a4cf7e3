"""Inference client base class and factory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import ReceiptsConfig


class InferenceClient(ABC):
    """Abstract base for multimodal text-and-image inference services."""

    @abstractmethod
    async def generate(
        self, prompt: str, image_base64: str, mime_type: str
    ) -> Any:
        """Send the prompt and image, returning the raw SDK response.

        The response shape is SDK-dependent; callers extract text from it
        with :func:`pricebook.receipts.extraction.extract_text`.
        """
        ...

    def list_models(self, name_filter: str = "") -> list[tuple[str, str]]:
        """Return ``(name, display_name)`` pairs for the backend's models."""
        raise NotImplementedError(
            f"{type(self).__name__} does not support listing models"
        )


def create_client(config: ReceiptsConfig) -> InferenceClient:
    """Create an inference client based on configuration."""
    backend_name = config.inference.backend

    match backend_name:
        case "gemini":
            from .gemini import GeminiInferenceClient

            return GeminiInferenceClient(
                api_key=config.inference.gemini.api_key,
                model=config.inference.gemini.model,
                grounding=config.inference.gemini.grounding,
            )
        case _:
            raise ValueError(
                f"Unknown inference backend: {backend_name!r} (expected: gemini)"
            )
