"""Text extraction from inference responses of varying shape.

SDK releases have shipped several response envelopes: a ``text()``
method, a ``text`` property, a ``response`` wrapper, or only a raw
``candidates[].content.parts[]`` list. Each strategy below probes one of
these shapes and returns the text it finds, or ``None``. Strategies run
in priority order until one yields non-empty text.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .errors import EmptyResponse

logger = logging.getLogger(__name__)

TextStrategy = Callable[[Any], "str | None"]

# Raised by SDK accessors when a candidate carries no text parts.
_PROBE_ERRORS = (AttributeError, KeyError, IndexError, TypeError, ValueError)


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _join_parts(candidate: Any) -> str:
    parts = _field(_field(candidate, "content"), "parts") or []
    texts = []
    for part in parts:
        text = _field(part, "text")
        if isinstance(text, str):
            texts.append(text)
    return "".join(texts)


def _first_candidate_text(obj: Any) -> str | None:
    candidates = _field(obj, "candidates")
    if not candidates:
        return None
    return _join_parts(candidates[0])


def text_method(response: Any) -> str | None:
    """``response.text()`` when ``text`` is a method."""
    accessor = _field(response, "text")
    if callable(accessor):
        value = accessor()
        if isinstance(value, str):
            return value
    return None


def text_attribute(response: Any) -> str | None:
    """``response.text`` when it is a plain string."""
    value = _field(response, "text")
    return value if isinstance(value, str) else None


def wrapped_response(response: Any) -> str | None:
    """``response.response`` exposing either ``text()`` or candidates."""
    inner = _field(response, "response")
    if inner is None:
        return None
    accessor = _field(inner, "text")
    if callable(accessor):
        value = accessor()
        return value if isinstance(value, str) else None
    return _first_candidate_text(inner)


def first_candidate(response: Any) -> str | None:
    """Parts of the first top-level candidate."""
    return _first_candidate_text(response)


def all_candidates(response: Any) -> str | None:
    """Text fragments from every candidate, concatenated."""
    candidates = _field(response, "candidates") or []
    return "".join(_join_parts(candidate) for candidate in candidates)


DEFAULT_STRATEGIES: tuple[TextStrategy, ...] = (
    text_method,
    text_attribute,
    wrapped_response,
    first_candidate,
    all_candidates,
)


def extract_text(
    response: Any, strategies: tuple[TextStrategy, ...] = DEFAULT_STRATEGIES
) -> str:
    """Return the first non-empty text yielded by ``strategies``.

    Raises:
        EmptyResponse: If no strategy finds any text.
    """
    for strategy in strategies:
        try:
            text = strategy(response)
        except _PROBE_ERRORS as e:
            logger.debug("Strategy %s failed: %s", strategy.__name__, e)
            continue
        if text:
            logger.debug("Extracted response text via %s", strategy.__name__)
            return text

    logger.error("Failed to extract text from response: %r", response)
    raise EmptyResponse(
        "Gemini response was empty or in an unrecognized format"
    )
