"""Gemini API inference client for receipt images."""

from __future__ import annotations

import base64
import logging
from typing import Any

from ..errors import ConfigurationError
from . import InferenceClient

logger = logging.getLogger(__name__)


class GeminiInferenceClient(InferenceClient):
    """Send receipt images to Google Gemini with search grounding."""

    def __init__(
        self,
        api_key: str = "",
        model: str = "gemini-2.0-flash",
        grounding: bool = True,
    ) -> None:
        if not api_key:
            raise ConfigurationError(
                "Gemini API key not configured. "
                "Set it in the config file or the GEMINI_API_KEY environment variable."
            )
        self._api_key = api_key
        self._model = model
        self._grounding = grounding

    @property
    def model(self) -> str:
        return self._model

    def _client(self):
        try:
            from google import genai
        except ImportError:
            raise ImportError(
                "google-genai SDK is required: pip install google-genai"
            ) from None

        return genai.Client(api_key=self._api_key)

    async def generate(
        self, prompt: str, image_base64: str, mime_type: str
    ) -> Any:
        client = self._client()
        from google.genai import types

        config = None
        if self._grounding:
            config = types.GenerateContentConfig(
                tools=[types.Tool(google_search=types.GoogleSearch())]
            )

        contents = [
            prompt,
            types.Part.from_bytes(
                data=base64.b64decode(image_base64), mime_type=mime_type
            ),
        ]

        logger.info(
            "Sending request to Gemini (model=%s, type=%s, grounding=%s)",
            self._model,
            mime_type,
            self._grounding,
        )
        return await client.aio.models.generate_content(
            model=self._model, contents=contents, config=config
        )

    def list_models(self, name_filter: str = "gemini") -> list[tuple[str, str]]:
        """Return ``(name, display_name)`` for models whose name contains ``name_filter``."""
        client = self._client()
        models = []
        for model in client.models.list():
            name = model.name or ""
            if name_filter in name:
                models.append((name, model.display_name or ""))
        return models
