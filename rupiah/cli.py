"""Command-line access to the Rupiah codec.

    rupiah format 1500000,5 --decimal            -> Rp 1.500.000,50
    rupiah compact 1500000                       -> Rp 1,5 juta
    rupiah words 1234567 --uppercase             -> Satu juta dua ratus ...
    rupiah parse "Rp 1,5 juta"                   -> 1500000
    rupiah round 1234567 --unit juta             -> 1000000

Amounts are read with the grouped-notation parser, so "1.500" is fifteen
hundred and "1.500,50" keeps its decimals. Exponent notation ("1e6") is read
as a float. Put ``--`` before a negative grouped amount so it is not taken for
an option.
"""
from __future__ import annotations

import argparse
import logging
import math
import re
import sys
from typing import Optional

from .config.logsetup import configure_logging
from .currency import RoundUnit, RupiahOptions, parse_plain
from .services import currency_service
from .utils.errors import DomainError

logger = logging.getLogger(__name__)

_EXPONENT_RE = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?[eE][-+]?[0-9]+")


def _amount(raw: str) -> float:
    value: Optional[float]
    if _EXPONENT_RE.fullmatch(raw.strip()):
        value = float(raw)
    else:
        value = parse_plain(raw)
    if value is None or not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"not an amount: {raw!r}")
    return value


def _display_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rupiah", description="Format, parse and spell Indonesian Rupiah amounts")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    f = sub.add_parser("format", help="Grouped notation (Rp 1.500.000)")
    f.add_argument("amount", type=_amount)
    f.add_argument("--no-symbol", action="store_true", help="Omit the Rp symbol")
    f.add_argument("--decimal", action="store_true", help="Show decimals")
    f.add_argument("--precision", type=int, default=None)
    f.add_argument("--separator", default=".", help="Thousands separator")
    f.add_argument("--decimal-separator", default=",")
    f.add_argument("--no-space", action="store_true", help="No space after Rp")

    c = sub.add_parser("compact", help="Compact notation (Rp 1,5 juta)")
    c.add_argument("amount", type=_amount)

    w = sub.add_parser("words", help="Terbilang")
    w.add_argument("amount", type=_amount)
    w.add_argument("--uppercase", action="store_true", default=None)
    w.add_argument("--no-currency", action="store_true", help="Omit the trailing 'rupiah'")

    p = sub.add_parser("parse", help="Read an amount from text")
    p.add_argument("text")
    p.add_argument("--plain", action="store_true", help="Do not interpret unit words")

    r = sub.add_parser("round", help="Round to a clean figure")
    r.add_argument("amount", type=_amount)
    r.add_argument("--unit", choices=[u.value for u in RoundUnit], default=None)

    return parser.parse_args(argv)


def run(ns: argparse.Namespace) -> str:
    if ns.command == "format":
        options = RupiahOptions(
            symbol=not ns.no_symbol,
            decimal=ns.decimal,
            precision=ns.precision,
            separator=ns.separator,
            decimal_separator=ns.decimal_separator,
            space_after_symbol=not ns.no_space,
        )
        return currency_service.format_amount(ns.amount, options)
    if ns.command == "compact":
        return currency_service.compact_amount(ns.amount)
    if ns.command == "words":
        return currency_service.spell_amount(ns.amount, uppercase=ns.uppercase, with_currency=not ns.no_currency)
    if ns.command == "parse":
        mode = "plain" if ns.plain else "auto"
        return _display_number(currency_service.read_amount(ns.text, mode))
    if ns.command == "round":
        return _display_number(currency_service.round_amount(ns.amount, ns.unit))
    raise ValueError(f"unknown command {ns.command!r}")


def main(argv: Optional[list[str]] = None) -> int:
    ns = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging("DEBUG" if ns.verbose else None)
    try:
        print(run(ns))
    except DomainError as exc:
        logger.debug("Command %s failed: %s", ns.command, exc.code)
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
