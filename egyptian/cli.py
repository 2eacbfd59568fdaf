"""Print greedy Egyptian fraction decompositions from the command line.

Examples::

    egyptian                      # 5/121 = 1/25 + 1/757 + 1/763309 + ...
    egyptian 2/3 2/5 --check
    egyptian --parfile fractions.toml -v
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .config import DEFAULT_FRACTION, ParfileConfig, load_parfile
from .decompose import decompose_many, render_terms, sum_terms
from .errors import EgyptianError
from .rational import Rational

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "egyptian"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def enable_debug_logging() -> None:
    logging.getLogger().setLevel(logging.DEBUG)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="egyptian",
        description="Decompose fractions into sums of unit fractions (greedy method).",
    )
    parser.add_argument(
        "fractions",
        nargs="*",
        metavar="FRACTION",
        help=f"Fractions written as a/b (default: {DEFAULT_FRACTION})",
    )
    parser.add_argument("--parfile", dest="parfile", help="TOML parfile listing fractions")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Also print the exact sum of the terms",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_tokens(cli_tokens: Sequence[str], config: Optional[ParfileConfig]) -> List[str]:
    """Command line fractions win over the parfile; fall back to the default."""
    if cli_tokens:
        return list(cli_tokens)
    if config is not None and config.fractions:
        return list(config.fractions)
    return [DEFAULT_FRACTION]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_parfile(args.parfile) if args.parfile else None
    except EgyptianError as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 2

    if config is not None:
        if config.verbose:
            enable_debug_logging()
        logger.debug("parfile %s lists %d fraction(s)", args.parfile, len(config.fractions))

    try:
        values = [Rational.from_string(token) for token in resolve_tokens(args.fractions, config)]
    except EgyptianError as e:
        print(f"[ERR] {e}", file=sys.stderr)
        return 2

    results = decompose_many(values)
    for value, terms in zip(values, results):
        print(f"{value} = {render_terms(terms)}")
        if args.check and terms is not None:
            total = sum_terms(terms)
            status = "exact" if total == value else "MISMATCH"
            print(f"  sum = {total} ({status})")
    logger.debug("decomposed %d fraction(s)", len(values))
    return 0


if __name__ == "__main__":
    sys.exit(main())
