#!/usr/bin/env python3
"""CLI entry point for browsing the Dizzyjam catalogue and pricing carts."""

import argparse
import json
import logging
import sys

from dizzyjam.client import DizzyjamClient
from dizzyjam.errors import DizzyjamError
from dizzyjam.models import Cart


def _parse_item(value: str) -> tuple[int, str, str, int]:
    """Parse a PRODUCT_ID:COLOUR:SIZE:QTY item specification."""
    parts = value.split(":")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(
            f"Invalid item '{value}', expected PRODUCT_ID:COLOUR:SIZE:QTY."
        )
    product_id, colour_id, size, quantity = parts
    try:
        return int(product_id), colour_id, size, int(quantity)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Invalid item '{value}': product ID and quantity must be integers."
        ) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dizzyjam",
        description="Query the Dizzyjam API from the command line.",
    )
    parser.add_argument(
        "--api-url",
        help="API base URL (overrides DIZZYJAM_API_URL env var).",
    )
    parser.add_argument(
        "--auth-id",
        help="API ID for signed requests (overrides DIZZYJAM_AUTH_ID env var).",
    )
    parser.add_argument(
        "--api-key",
        help="API key for signed requests (overrides DIZZYJAM_API_KEY env var).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log requests to stderr.",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    stores = commands.add_parser("stores", help="List all stores.")
    stores.add_argument("--count", type=int)
    stores.add_argument("--start", type=int)

    store_info = commands.add_parser("store-info", help="Show details for a store.")
    store_info.add_argument("store_id")
    store_info.add_argument("--country", help="2-char country code for shipping costs.")
    store_info.add_argument("--count", type=int)
    store_info.add_argument("--start", type=int)

    product_info = commands.add_parser("product-info", help="Show details for a product.")
    product_info.add_argument("product_id", type=int)
    product_info.add_argument("--country", help="2-char country code for shipping costs.")

    calculate = commands.add_parser("calculate", help="Price a cart of items.")
    calculate.add_argument(
        "--item",
        dest="items",
        action="append",
        type=_parse_item,
        required=True,
        metavar="PRODUCT_ID:COLOUR:SIZE:QTY",
        help="Item to add to the cart (repeatable).",
    )
    calculate.add_argument("--country", help="2-char country code for shipping costs.")

    return parser


def _run(client: DizzyjamClient, args) -> dict:
    """Dispatch the parsed command to the matching API call."""
    if args.command == "stores":
        return client.catalogue.stores(args.count, args.start)

    if args.command == "store-info":
        return client.catalogue.store_info(
            args.store_id, country=args.country, count=args.count, start=args.start
        )

    if args.command == "product-info":
        return client.catalogue.product_info(args.product_id, args.country)

    if args.command == "calculate":
        cart = Cart()
        for item in args.items:
            cart.add_item(*item)
        return cart.calculate(client, args.country)

    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    client = DizzyjamClient(
        api_url=args.api_url,
        auth_id=args.auth_id,
        api_key=args.api_key,
    )

    try:
        response = _run(client, args)
    except DizzyjamError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.details:
            print(json.dumps(exc.details, indent=2, default=str), file=sys.stderr)
        sys.exit(1)

    print(json.dumps(response, indent=2))


if __name__ == "__main__":
    main()
