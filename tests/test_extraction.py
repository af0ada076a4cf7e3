"""Tests for response text extraction strategies."""

from types import SimpleNamespace

import pytest

from pricebook.receipts.errors import EmptyResponse
from pricebook.receipts.extraction import (
    DEFAULT_STRATEGIES,
    all_candidates,
    extract_text,
    first_candidate,
    text_attribute,
    text_method,
    wrapped_response,
)


def _candidate(*texts):
    parts = [SimpleNamespace(text=t) for t in texts]
    return SimpleNamespace(content=SimpleNamespace(parts=parts))


class _RaisingText:
    """Mimics SDK responses whose ``text`` accessor raises without parts."""

    def __init__(self, candidates):
        self.candidates = candidates

    @property
    def text(self):
        raise ValueError("The `response.text` quick accessor requires a single candidate")


def test_strategy_order():
    assert DEFAULT_STRATEGIES == (
        text_method,
        text_attribute,
        wrapped_response,
        first_candidate,
        all_candidates,
    )


def test_text_method():
    response = SimpleNamespace(text=lambda: '{"a": 1}')
    assert extract_text(response) == '{"a": 1}'


def test_text_attribute():
    response = SimpleNamespace(text='{"b": 2}')
    assert text_method(response) is None
    assert extract_text(response) == '{"b": 2}'


def test_wrapped_response_text_method():
    response = SimpleNamespace(response=SimpleNamespace(text=lambda: "wrapped"))
    assert extract_text(response) == "wrapped"


def test_wrapped_response_candidates():
    response = SimpleNamespace(
        response=SimpleNamespace(candidates=[_candidate("he", "llo")])
    )
    assert extract_text(response) == "hello"


def test_top_level_candidates_only():
    response = SimpleNamespace(candidates=[_candidate('{"store": ', '"Aldi"}')])
    assert extract_text(response) == '{"store": "Aldi"}'


def test_first_candidate_empty_falls_back_to_all_candidates():
    response = SimpleNamespace(
        candidates=[_candidate(), _candidate("second")]
    )
    assert first_candidate(response) == ""
    assert extract_text(response) == "second"


def test_raising_text_accessor_falls_through():
    response = _RaisingText([_candidate("from parts")])
    assert extract_text(response) == "from parts"


def test_dict_shaped_response():
    response = {
        "candidates": [
            {"content": {"parts": [{"text": "x"}, {"inline_data": {}}, {"text": "y"}]}}
        ]
    }
    assert extract_text(response) == "xy"


def test_empty_text_tries_next_strategy():
    response = SimpleNamespace(text="", candidates=[_candidate("fallback")])
    assert extract_text(response) == "fallback"


def test_no_text_raises_empty_response():
    response = SimpleNamespace(candidates=[_candidate()])
    with pytest.raises(EmptyResponse, match="empty or in an unrecognized format"):
        extract_text(response)


def test_none_response_raises_empty_response():
    with pytest.raises(EmptyResponse):
        extract_text(None)


def test_custom_strategies():
    def always(_response):
        return "custom"

    assert extract_text(object(), strategies=(always,)) == "custom"
