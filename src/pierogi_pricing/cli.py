"""
Command-line interface for PierogiGo Pricing.
"""

import argparse
import dataclasses
import json
import os
import sys
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pymongo.errors import PyMongoError

from . import __version__
from .pricing.errors import PricingError
from .pricing.models import (
    COUPONS,
    TIERS,
    UNSET,
    ZONES,
    CustomerProfile,
    DeliveryInfo,
    PricingContext,
)
from .pricing.service import PricingService
from .utils.config import Config
from .utils.logging import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="PierogiGo Pricing - order total calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pierogi-pricing --version
  pierogi-pricing price-file order.json
  pierogi-pricing price-file order.json --tier vip --zone outer --rush
  pierogi-pricing price-order --order-id 5f0c1a7e --env production
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"PierogiGo Pricing {__version__}",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--log-file",
        help="Log file path",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
    )

    file_parser = subparsers.add_parser(
        "price-file",
        help="Price an order stored as a JSON document",
    )
    file_parser.add_argument("path", help="Path to the order JSON file")
    _add_context_arguments(file_parser)

    order_parser = subparsers.add_parser(
        "price-order",
        help="Price an order from the order database",
    )
    order_parser.add_argument(
        "--order-id",
        type=str,
        required=True,
        help="ID of the order to price",
    )
    order_parser.add_argument(
        "--env",
        type=str,
        choices=["staging", "production", "stg", "prod"],
        default="staging",
        help="Database environment (default: staging)",
    )
    _add_context_arguments(order_parser)

    return parser


def _add_context_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--tier", choices=TIERS, help="Override the customer tier")
    parser.add_argument("--zone", choices=ZONES, help="Override the delivery zone")
    parser.add_argument(
        "--rush",
        action="store_true",
        default=None,
        help="Request rush delivery",
    )
    coupon_group = parser.add_mutually_exclusive_group()
    coupon_group.add_argument("--coupon", choices=COUPONS, help="Apply a coupon")
    coupon_group.add_argument(
        "--no-coupon",
        action="store_true",
        help="Ignore the coupon stored on the order",
    )


def build_context(parsed_args: argparse.Namespace, document: Mapping[str, Any]) -> PricingContext:
    """Turn CLI overrides into a pricing context.

    Delivery flags only replace the fields they name; the rest of the
    order's delivery details (or the defaults) are kept.
    """
    profile = CustomerProfile(parsed_args.tier) if parsed_args.tier else None

    delivery = None
    if parsed_args.zone or parsed_args.rush:
        delivery = DeliveryInfo.from_dict(document.get("delivery") or {})
        if parsed_args.zone:
            delivery = dataclasses.replace(delivery, zone=parsed_args.zone)
        if parsed_args.rush:
            delivery = dataclasses.replace(delivery, rush=True)

    if parsed_args.no_coupon:
        coupon = None
    elif parsed_args.coupon:
        coupon = parsed_args.coupon
    else:
        coupon = UNSET
    return PricingContext(profile=profile, delivery=delivery, coupon=coupon)


def format_cents(cents: int) -> str:
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents) // 100:,}.{abs(cents) % 100:02d}"


def render_breakdown(breakdown: Dict[str, Any]) -> str:
    """Render a price breakdown as a boxed table."""
    lines: List[Tuple[str, str]] = [
        ("Order ID", str(breakdown["order_id"])),
        ("Subtotal", format_cents(breakdown["subtotal"])),
        ("Discounts", format_cents(-breakdown["discounts"])),
        ("Delivery", format_cents(breakdown["delivery"])),
        ("Tax", format_cents(breakdown["tax"])),
        ("Total", format_cents(breakdown["total"])),
    ]
    label_width = max(len(lbl) for lbl, _ in lines)
    inner_width = max(len(f" {lbl.ljust(label_width)} : {val} ") for lbl, val in lines)
    out = ["┌" + "─" * inner_width + "┐"]
    for lbl, val in lines:
        line = f" {lbl.ljust(label_width)} : {val}"
        out.append(f"│{line.ljust(inner_width)}│")
    out.append("└" + "─" * inner_width + "┘")
    return "\n".join(out)


def price_file(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Price the order document at ``parsed_args.path``."""
    with open(parsed_args.path, encoding="utf-8") as handle:
        document = json.load(handle)
    service = PricingService()
    return service.price_document(document, build_context(parsed_args, document))


def price_order(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Price a stored order in the chosen environment."""
    config = Config(".env")

    env_map = {
        "staging": "stg",
        "stg": "stg",
        "production": "prod",
        "prod": "prod",
    }
    env_key = env_map.get(parsed_args.env.lower(), "stg")
    suffix = env_key.upper()
    db_name = os.getenv(f"DB_NAME_{suffix}") or os.getenv("DB_NAME")

    service = PricingService(
        db_name=db_name,
        connection_url_env_key=f"DB_CONNECTION_URL_{suffix}",
        config=config,
    )
    document = service.fetch_document(parsed_args.order_id)
    return service.price_document(document, build_context(parsed_args, document))


def main(args: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = "DEBUG" if parsed_args.verbose else "INFO"
    logger = setup_logging(level=log_level, log_file=parsed_args.log_file)

    if not parsed_args.command:
        parser.print_help()
        return 1

    try:
        if parsed_args.command == "price-file":
            breakdown = price_file(parsed_args)
        else:
            breakdown = price_order(parsed_args)
    except (OSError, ValueError, PricingError, PyMongoError) as e:
        logger.error(f"Error: {e}")
        return 1

    print(render_breakdown(breakdown))
    return 0


if __name__ == "__main__":
    sys.exit(main())
