"""Terbilang: spell a Rupiah amount in Indonesian words.

Irregular forms:
- 10..19 come from the teens table ("sepuluh", "sebelas", "dua belas", ...)
- a hundreds digit of 1 is "seratus"
- a ribu count of exactly 1 is "seribu"; juta/miliar/triliun keep "satu"

Fractions are dropped (terbilang never spells sen). A triliun count above 999
is itself spelled in groups, so 10**15 reads "seribu triliun".

Examples:
>>> to_words(1500000)
'satu juta lima ratus ribu rupiah'
>>> to_words(1000)
'seribu rupiah'
>>> to_words(-11, with_currency=False, uppercase=True)
'Minus sebelas'
"""
from __future__ import annotations

import math
from typing import Any, Optional

from .lexicon import (
    CURRENCY_WORD,
    DIGITS,
    HUNDRED_SINGLE,
    HUNDRED_WORD,
    NEGATIVE_WORD,
    TEENS,
    TENS,
    THOUSAND_SINGLE,
    ZERO_WORD,
)
from .types import MagnitudeUnit, Number, WordOptions

__all__ = ["group_to_words", "integer_to_words", "to_words"]


def _two_digits(n: int) -> str:
    if n < 10:
        return DIGITS[n]
    if n < 20:
        return TEENS[n - 10]
    tens, ones = divmod(n, 10)
    if ones:
        return f"{TENS[tens]} {DIGITS[ones]}"
    return TENS[tens]


def group_to_words(n: int) -> str:
    """Spell a group value 0..999; zero yields an empty string."""
    hundreds, rest = divmod(n, 100)
    parts: list[str] = []
    if hundreds:
        parts.append(HUNDRED_SINGLE if hundreds == 1 else f"{DIGITS[hundreds]} {HUNDRED_WORD}")
    if rest:
        parts.append(_two_digits(rest))
    return " ".join(parts)


def integer_to_words(n: int) -> str:
    """Spell a non-negative integer without sign or currency suffix."""
    if n == 0:
        return ZERO_WORD

    parts: list[str] = []
    remainder = n
    for unit in MagnitudeUnit:
        count, remainder = divmod(remainder, unit.divisor)
        if not count:
            continue
        if unit is MagnitudeUnit.RIBU and count == 1:
            parts.append(THOUSAND_SINGLE)
        elif count >= 1000:
            # Only reachable for triliun: the count itself needs grouping.
            parts.append(f"{integer_to_words(count)} {unit.word}")
        else:
            parts.append(f"{group_to_words(count)} {unit.word}")
    if remainder:
        parts.append(group_to_words(remainder))
    return " ".join(parts)


def to_words(amount: Number, options: Optional[WordOptions] = None, **overrides: Any) -> str:
    """Spell ``amount`` in Indonesian.

    ``uppercase`` capitalises the first character only; ``with_currency``
    appends "rupiah" after everything else, including the "minus" prefix.
    """
    opts = (options or WordOptions()).merged(**overrides)
    magnitude = math.floor(abs(amount))

    words = integer_to_words(magnitude)
    if amount < 0 and magnitude:
        words = f"{NEGATIVE_WORD} {words}"
    if opts.with_currency:
        words = f"{words} {CURRENCY_WORD}"
    if opts.uppercase:
        words = words[:1].upper() + words[1:]
    return words
