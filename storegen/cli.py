#!/usr/bin/env python3
"""
Store Data Generation CLI

Bulk-creates store data through a generator backend while reporting progress
and elapsed time.

Environment Variables:
- STOREGEN_BACKEND: backend import path (package.module:attribute)
- STOREGEN_SHOW_PROGRESS: set to 0/false to hide progress bars
- Loads from a .env file in the working directory if available

Usage:
    storegen generate products [<amount>]
    storegen generate orders [<amount>] [--date-start=] [--date-end=] [--status=] [--coupons=]
    storegen generate customers [<amount>]
    storegen generate coupons [<amount>] [--min=] [--max=]
    storegen generate terms <taxonomy> [<amount>] [--max_depth=] [--parent=]

Examples:
    storegen generate terms product_tag 10
    storegen generate terms product_cat 50 --max_depth=3
"""

import argparse
from typing import List, Optional

from storegen.backend import load_backend
from storegen.config import Config
from storegen.dispatcher import CommandDispatcher, CommandOptions
from storegen.exceptions import BackendLoadError
from storegen.options import (
    CouponsOptions,
    CustomersOptions,
    OrdersOptions,
    ProductsOptions,
    TermsOptions,
    coerce_amount,
)
from storegen.utils.logging_utils import log_error, log_progress


def _add_amount_argument(parser: argparse.ArgumentParser, noun: str, default: int) -> None:
    parser.add_argument(
        "amount",
        nargs="?",
        default=None,
        help=f"The amount of {noun} to generate (default: {default})",
    )


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with the ``generate`` command group.

    Returns:
        argparse.ArgumentParser: Configured parser.
    """
    parser = argparse.ArgumentParser(
        prog="storegen", description="Generate store data through a generator backend"
    )
    parser.add_argument(
        "--backend",
        help="Backend import path (package.module:attribute), overrides STOREGEN_BACKEND",
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Do not draw progress bars"
    )

    groups = parser.add_subparsers(dest="group")
    generate = groups.add_parser("generate", help="Generate store data")
    commands = generate.add_subparsers(dest="command")

    products = commands.add_parser("products", help="Generate products")
    _add_amount_argument(products, "products", Config.DEFAULT_PRODUCTS)

    orders = commands.add_parser("orders", help="Generate orders")
    _add_amount_argument(orders, "orders", Config.DEFAULT_ORDERS)
    orders.add_argument("--date-start", dest="date_start", help="Earliest order date")
    orders.add_argument("--date-end", dest="date_end", help="Latest order date")
    orders.add_argument("--status", help="Order status for all generated orders")
    orders.add_argument("--coupons", help="Apply coupons to generated orders")

    customers = commands.add_parser("customers", help="Generate customers")
    _add_amount_argument(customers, "customers", Config.DEFAULT_CUSTOMERS)

    coupons = commands.add_parser("coupons", help="Generate coupons")
    _add_amount_argument(coupons, "coupons", Config.DEFAULT_COUPONS)
    coupons.add_argument(
        "--min",
        type=int,
        default=Config.COUPON_MIN,
        help=f"Minimum coupon amount (default: {Config.COUPON_MIN})",
    )
    coupons.add_argument(
        "--max",
        type=int,
        default=Config.COUPON_MAX,
        help=f"Maximum coupon amount (default: {Config.COUPON_MAX})",
    )

    terms = commands.add_parser("terms", help="Generate product categories or tags")
    terms.add_argument(
        "taxonomy",
        choices=Config.TAXONOMIES,
        help="The taxonomy to generate the terms for",
    )
    terms.add_argument(
        "amount",
        nargs="?",
        default=None,
        help=f"The number of terms to generate. Max value 100 (default: {Config.DEFAULT_TERMS})",
    )
    terms.add_argument(
        "--max_depth",
        type=int,
        choices=Config.MAX_DEPTH_CHOICES,
        default=Config.TERM_MAX_DEPTH,
        help=(
            "The maximum number of hierarchy levels for the terms. A value of 1 "
            "means all categories will be top-level. Only applies to hierarchical taxonomies"
        ),
    )
    terms.add_argument(
        "--parent",
        type=int,
        default=Config.TERM_PARENT,
        help="Existing term ID to use as the parent for the new terms",
    )

    return parser


def build_options(args: argparse.Namespace) -> CommandOptions:
    """
    Convert parsed arguments into the option set for ``args.command``.

    Args:
        args: Namespace returned by the parser.

    Returns:
        CommandOptions: Typed options with defaults applied.
    """
    if args.command == "products":
        return ProductsOptions(amount=coerce_amount(args.amount, Config.DEFAULT_PRODUCTS))
    if args.command == "orders":
        return OrdersOptions(
            amount=coerce_amount(args.amount, Config.DEFAULT_ORDERS),
            status=args.status,
            date_start=args.date_start,
            date_end=args.date_end,
            coupons=args.coupons,
        )
    if args.command == "customers":
        return CustomersOptions(amount=coerce_amount(args.amount, Config.DEFAULT_CUSTOMERS))
    if args.command == "coupons":
        return CouponsOptions(
            amount=coerce_amount(args.amount, Config.DEFAULT_COUPONS),
            min=args.min,
            max=args.max,
        )
    if args.command == "terms":
        return TermsOptions(
            taxonomy=args.taxonomy,
            amount=coerce_amount(args.amount, Config.DEFAULT_TERMS),
            max_depth=args.max_depth,
            parent=args.parent,
        )
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI arguments, resolve the backend and run the requested command.

    Args:
        argv: Argument list, defaults to sys.argv[1:].

    Returns:
        int: Process exit code (0 on success, 1 on failure, 2 on usage errors).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.group != "generate" or not args.command:
        parser.print_help()
        return 2

    backend_path = args.backend or Config.BACKEND
    try:
        if not backend_path:
            Config.validate()
        backend = load_backend(backend_path)
    except (ValueError, BackendLoadError) as e:
        log_error("Configuration", e)
        return 1

    log_progress("Configuration", f"Using backend {backend_path}")
    dispatcher = CommandDispatcher(
        backend, show_progress=Config.SHOW_PROGRESS and not args.no_progress
    )
    result = dispatcher.run(args.command, build_options(args))
    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
