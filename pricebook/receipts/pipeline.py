"""Receipt image → ParsedReceipt extraction pipeline."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from .config import RetryConfig
from .errors import UpstreamUnavailable
from .extraction import extract_text
from .mime import sniff_mime_type
from .models import ParsedReceipt
from .normalize import UNKNOWN_ITEM_NAME, build_receipt, parse_json_object
from .prompt import RECEIPT_PROMPT

if TYPE_CHECKING:
    from .config import ReceiptsConfig
    from .inference import InferenceClient

logger = logging.getLogger(__name__)

RATE_LIMIT_STATUS = 429


def is_rate_limited(error: BaseException) -> bool:
    """Return True if ``error`` carries an HTTP 429 status."""
    for attr in ("status", "code", "status_code"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and value == RATE_LIMIT_STATUS:
            return True
    return False


class ReceiptPipeline:
    """Convert base64 receipt photos into validated ParsedReceipt records.

    Each call is independent: the only state is the retry loop's local
    counters, so one pipeline can serve concurrent requests.
    """

    def __init__(
        self,
        client: InferenceClient,
        retry: RetryConfig | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        default_currency: str = "USD",
        unknown_item_name: str = UNKNOWN_ITEM_NAME,
    ) -> None:
        self._client = client
        self._retry = retry or RetryConfig()
        self._sleep = sleep
        self._default_currency = default_currency
        self._unknown_item_name = unknown_item_name

    async def parse_receipt_image(self, image_base64: str) -> ParsedReceipt:
        """Parse a base64-encoded receipt image.

        Raises:
            ValueError: If ``image_base64`` is empty.
            UpstreamUnavailable: If the service stays rate-limited.
            EmptyResponse: If no text could be extracted.
            MalformedResponse: If the text holds no parseable JSON object.
        """
        if not image_base64 or not image_base64.strip():
            raise ValueError("Receipt image data is empty")
        image_base64 = image_base64.strip()

        mime_type = sniff_mime_type(image_base64)
        response = await self._generate_with_retry(image_base64, mime_type)

        text = extract_text(response)
        payload = parse_json_object(text)
        receipt = build_receipt(
            payload,
            default_currency=self._default_currency,
            unknown_item_name=self._unknown_item_name,
        )

        logger.info(
            "Parsed receipt: %s, %d items", receipt.store, len(receipt.items)
        )
        return receipt

    async def _generate_with_retry(self, image_base64: str, mime_type: str) -> Any:
        delay = self._retry.initial_delay
        attempt = 0
        while True:
            attempt += 1
            try:
                return await self._client.generate(
                    RECEIPT_PROMPT, image_base64, mime_type
                )
            except Exception as e:
                if not is_rate_limited(e):
                    raise
                retries_left = self._retry.max_retries - (attempt - 1)
                if retries_left <= 0:
                    raise UpstreamUnavailable(
                        f"Gemini rate limit persisted after {attempt} attempts",
                        attempts=attempt,
                    ) from e
                logger.warning(
                    "Rate limited (429). Retrying in %.1fs... (%d attempts left)",
                    delay,
                    retries_left,
                )
                await self._sleep(delay)
                delay *= self._retry.multiplier


def create_pipeline(config: ReceiptsConfig) -> ReceiptPipeline:
    """Build a pipeline wired to the configured inference backend."""
    from .inference import create_client

    return ReceiptPipeline(
        client=create_client(config),
        retry=config.retry,
        default_currency=config.receipt.default_currency,
        unknown_item_name=config.receipt.unknown_item_name,
    )
