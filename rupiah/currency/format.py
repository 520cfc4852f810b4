"""Rupiah display formatting: grouped digits and compact unit notation.

Rules:
- Sign is applied after grouping and after the currency symbol ("Rp -1.500.000")
- Decimal rounding is half away from zero on the decimal representation of the
  amount, so the digits shown always belong to the rounded value
- Pure string manipulation (no locale module)
- Compact notation never shows a zero fraction ("1 juta", not "1,0 juta")

Non-finite amounts (NaN, infinities) are not supported; the ``decimal`` and
``math`` modules raise for them and the error is not trapped here.

Examples:
>>> format_grouped(1500000)
'Rp 1.500.000'
>>> format_grouped(1500000.556, decimal=True)
'Rp 1.500.000,56'
>>> format_grouped(-1500000, separator=",", space_after_symbol=False)
'Rp-1,500,000'
>>> to_compact(1500000)
'Rp 1,5 juta'
>>> to_compact(500000)
'Rp 500 ribu'
>>> to_compact(1500)
'Rp 1.500'
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Optional

from .lexicon import COMPACT_RIBU_THRESHOLD, CURRENCY_SYMBOL
from .types import MagnitudeUnit, Number, RupiahOptions

__all__ = ["group_digits", "round_half_away", "format_grouped", "to_compact"]


def group_digits(digits: str, separator: str = ".") -> str:
    """Insert ``separator`` every three digits counted from the right."""
    groups: list[str] = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return separator.join(groups)


def round_half_away(value: Number, places: int) -> Decimal:
    """Round ``value`` to ``places`` decimals, halves away from zero."""
    exponent = Decimal(1).scaleb(-places)
    operand = Decimal(str(value))
    # Precision must cover every integer digit plus the kept decimals.
    context = Context(prec=max(28, operand.adjusted() + places + 2))
    return operand.quantize(exponent, rounding=ROUND_HALF_UP, context=context)


def _signed(body: str, negative: bool) -> str:
    # No "-0": a magnitude that rendered as zero carries no sign.
    if negative and any(ch in "123456789" for ch in body):
        return "-" + body
    return body


def format_grouped(amount: Number, options: Optional[RupiahOptions] = None, **overrides: Any) -> str:
    """Format ``amount`` as grouped Rupiah notation.

    ``options`` supplies a full configuration; keyword ``overrides`` (any
    :class:`RupiahOptions` field) are applied on top of it for this call only.
    """
    opts = (options or RupiahOptions()).merged(**overrides)
    negative = amount < 0
    magnitude = abs(amount)

    if opts.decimal:
        rounded = round_half_away(magnitude, opts.effective_precision)
        int_part, _, frac_part = format(rounded, "f").partition(".")
    else:
        int_part, frac_part = str(math.floor(magnitude)), ""

    body = group_digits(int_part, opts.separator)
    if frac_part:
        body = body + opts.decimal_separator + frac_part
    body = _signed(body, negative)

    if opts.symbol:
        space = " " if opts.space_after_symbol else ""
        return f"{CURRENCY_SYMBOL}{space}{body}"
    return body


def _compact_value(value: Number, word: str) -> str:
    rounded = round_half_away(value, 1)
    if rounded == rounded.to_integral_value():
        return f"{int(rounded)} {word}"
    return f"{format(rounded, 'f').replace('.', ',')} {word}"


def to_compact(amount: Number) -> str:
    """Format ``amount`` with the largest fitting magnitude word.

    ribu is only used from 100.000 upwards; smaller amounts are shown as
    grouped digits without decimals.
    """
    negative = amount < 0
    magnitude = abs(amount)

    for unit in MagnitudeUnit:
        threshold = COMPACT_RIBU_THRESHOLD if unit is MagnitudeUnit.RIBU else unit.divisor
        if magnitude >= threshold:
            body = _compact_value(magnitude / unit.divisor, unit.word)
            break
    else:
        body = format_grouped(magnitude, symbol=False, decimal=False, separator=".")

    return f"{CURRENCY_SYMBOL} {_signed(body, negative)}"
