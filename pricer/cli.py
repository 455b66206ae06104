"""Command line interface for the pricer.

Usage:
    pricer quote 1000 1000000 2000000
    pricer amount-out 1000 1000000 2000000
    pricer amount-in 1992 1000000 2000000
    pricer amounts-out --path A,B,C --pool A:B:1000000:2000000 --pool B:C:500000:1000000 1000
    pricer amounts-in --path A,B,C --pool A:B:1000000:2000000 --pool B:C:500000:1000000 3956
    pricer serve

Exit codes:
    0 - Success
    1 - Pricing failed (reason printed to stderr)
    2 - Invalid arguments
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import structlog

from pricer.amm import constant_product
from pricer.errors import PricingError
from pricer.pools import ConstantProductPool, ReserveBook
from pricer.routing import PathPricer

logger = structlog.get_logger()


def parse_pool(value: str) -> ConstantProductPool:
    """Parse a TOKEN0:TOKEN1:RESERVE0:RESERVE1 pool argument."""
    parts = value.split(":")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(
            f"Pool must be TOKEN0:TOKEN1:RESERVE0:RESERVE1, got '{value}'"
        )
    token0, token1, reserve0, reserve1 = parts
    try:
        return ConstantProductPool(token0, token1, int(reserve0), int(reserve1))
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Invalid pool '{value}': {err}") from err


def parse_path(value: str) -> list[str]:
    """Parse a comma-separated path argument."""
    return [token.strip() for token in value.split(",") if token.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pricer",
        description="Exact integer constant-product AMM pricing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    single_hop = {
        "quote": ("Proportional amount at the reserve ratio", "amount_a", "reserve_a", "reserve_b"),
        "amount-out": ("Output for an exact input", "amount_in", "reserve_in", "reserve_out"),
        "amount-in": ("Input for an exact output", "amount_out", "reserve_in", "reserve_out"),
    }
    for name, (help_text, *args) in single_hop.items():
        sub = commands.add_parser(name, help=help_text)
        for arg in args:
            sub.add_argument(arg, type=int)

    for name, amount_arg, help_text in (
        ("amounts-out", "amount_in", "Amounts along a path for an exact input"),
        ("amounts-in", "amount_out", "Amounts along a path for an exact output"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument(
            "--path",
            type=parse_path,
            required=True,
            help="Comma-separated asset identifiers, e.g. A,B,C",
        )
        sub.add_argument(
            "--pool",
            type=parse_pool,
            action="append",
            default=[],
            help="Pool reserves as TOKEN0:TOKEN1:RESERVE0:RESERVE1 (repeatable)",
        )
        sub.add_argument(amount_arg, type=int)

    commands.add_parser("serve", help="Run the HTTP API (see PRICER_HOST, PRICER_PORT)")
    return parser


def configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def run_command(args: argparse.Namespace) -> list[str]:
    """Execute a pricing command and return the lines to print.

    Raises:
        PricingError: If the pricing call fails
    """
    if args.command == "quote":
        return [str(constant_product.quote(args.amount_a, args.reserve_a, args.reserve_b))]
    if args.command == "amount-out":
        return [
            str(constant_product.get_amount_out(args.amount_in, args.reserve_in, args.reserve_out))
        ]
    if args.command == "amount-in":
        return [
            str(constant_product.get_amount_in(args.amount_out, args.reserve_in, args.reserve_out))
        ]

    pricer = PathPricer(ReserveBook.from_pools(args.pool))
    if args.command == "amounts-out":
        amounts = pricer.get_amounts_out(args.path, args.amount_in)
    else:
        amounts = pricer.get_amounts_in(args.path, args.amount_out)
    return [f"{token} {amount}" for token, amount in zip(args.path, amounts, strict=True)]


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "serve":
        from pricer.api.main import run

        run()
        return 0

    try:
        lines = run_command(args)
    except PricingError as err:
        logger.debug("command_failed", command=args.command, error=err.code)
        print(f"Error: {err.code}: {err}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
