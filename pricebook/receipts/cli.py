"""CLI entry point for receipt parsing."""

from __future__ import annotations

import argparse
import asyncio
import base64
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import load_config
from .errors import ReceiptParseError
from .inference import create_client
from .mime import sniff_mime_type
from .pipeline import create_pipeline


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pricebook-receipts",
        description="Parse grocery receipt photos into structured line items",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to the configuration file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # parse
    parse_parser = sub.add_parser("parse", help="Extract line items from a receipt image")
    parse_parser.add_argument("image", type=str, help="Receipt image file")
    parse_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # mime
    mime_parser = sub.add_parser("mime", help="Show the detected image MIME type")
    mime_parser.add_argument("image", type=str, help="Image file")

    # models
    models_parser = sub.add_parser("models", help="List available Gemini models")
    models_parser.add_argument(
        "--filter", type=str, default="gemini", help="Substring the model name must contain"
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    match args.command:
        case "mime":
            try:
                image_base64 = _read_base64(args.image)
            except OSError as e:
                print(f"Failed to read image: {e}", file=sys.stderr)
                sys.exit(1)
            print(sniff_mime_type(image_base64))
        case "models":
            load_dotenv()
            config = load_config(args.config)
            _cmd_models(config, args)
        case "parse":
            load_dotenv()
            config = load_config(args.config)
            asyncio.run(_cmd_parse(config, args))


def _read_base64(path: str) -> str:
    return base64.b64encode(Path(path).read_bytes()).decode()


def _cmd_models(config, args) -> None:
    try:
        client = create_client(config)
        models = client.list_models(args.filter)
    except (ReceiptParseError, NotImplementedError, ValueError) as e:
        print(f"Failed to list models: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Available models ({len(models)}):")
    for name, display_name in models:
        suffix = f" ({display_name})" if display_name else ""
        print(f"  - {name}{suffix}")


async def _cmd_parse(config, args) -> None:
    try:
        image_base64 = _read_base64(args.image)
        pipeline = create_pipeline(config)
        receipt = await pipeline.parse_receipt_image(image_base64)
    except (ReceiptParseError, OSError, ValueError) as e:
        print(f"Failed to parse receipt: {e}", file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(json.dumps(receipt.to_dict(), ensure_ascii=False, indent=2))
        return

    print(f"Store:    {receipt.store or '?'}")
    if receipt.store_location:
        print(f"Location: {receipt.store_location}")
    print(f"Date:     {receipt.date or '?'} {receipt.time or ''}".rstrip())
    print(f"\nItems ({len(receipt.items)}):")
    for item in receipt.items:
        tags = f"  [{', '.join(item.tags)}]" if item.tags else ""
        qty = f"{item.quantity} x " if item.quantity != 1 else ""
        print(f"  {qty}{item.name:<30} {item.price:>8.2f}{tags}")
    if receipt.total is not None:
        print(f"\nTotal: {receipt.total:.2f} {receipt.currency}")
