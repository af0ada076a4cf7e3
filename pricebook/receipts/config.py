"""TOML configuration loader for the receipt pipeline."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class GeminiConfig:
    api_key: str = ""
    model: str = "gemini-2.0-flash"
    grounding: bool = True


@dataclass
class InferenceConfig:
    backend: str = "gemini"
    gemini: GeminiConfig = field(default_factory=GeminiConfig)


@dataclass
class RetryConfig:
    max_retries: int = 3
    initial_delay: float = 2.0  # seconds
    multiplier: float = 2.0


@dataclass
class ReceiptConfig:
    default_currency: str = "USD"
    unknown_item_name: str = "Unknown Item"


@dataclass
class ReceiptsConfig:
    inference: InferenceConfig = field(default_factory=InferenceConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    receipt: ReceiptConfig = field(default_factory=ReceiptConfig)


def load_config(path: str | Path | None = None) -> ReceiptsConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The Gemini API key can be supplied via the GEMINI_API_KEY environment
    variable when the file leaves it empty.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    inf = raw.get("inference", {})
    rty = raw.get("retry", {})
    rcp = raw.get("receipt", {})

    gem = inf.get("gemini", {})
    # Resolve API key: config file → environment variable
    api_key = gem.get("api_key", "") or os.environ.get("GEMINI_API_KEY", "")

    return ReceiptsConfig(
        inference=InferenceConfig(
            backend=inf.get("backend", "gemini"),
            gemini=GeminiConfig(
                api_key=api_key,
                model=gem.get("model", "gemini-2.0-flash"),
                grounding=gem.get("grounding", True),
            ),
        ),
        retry=RetryConfig(
            max_retries=int(rty.get("max_retries", 3)),
            initial_delay=float(rty.get("initial_delay", 2.0)),
            multiplier=float(rty.get("multiplier", 2.0)),
        ),
        receipt=ReceiptConfig(
            default_currency=rcp.get("default_currency", "USD"),
            unknown_item_name=rcp.get("unknown_item_name", "Unknown Item"),
        ),
    )
