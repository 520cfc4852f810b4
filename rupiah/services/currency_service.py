"""Currency service layer.

Binds the pure codec to runtime defaults (settings) and turns parse failures
into domain exceptions. Shared by the HTTP routers and the CLI.

Design goals:
 - Keep HTTP concerns out (no HTTPException here); raise domain errors instead.
 - Never change codec semantics; only fill in defaults the caller left out.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from ..config.settings import get_settings
from ..currency import (
    RupiahOptions,
    WordOptions,
    format_grouped,
    parse_compact,
    parse_plain,
    resolve_round_unit,
    round_to_clean,
    to_compact,
    to_words,
)
from ..currency.types import Number, RoundUnit
from ..utils.errors import UnknownRoundUnit, UnparsableAmount

logger = logging.getLogger(__name__)


@dataclass
class AmountDescription:
    amount: float
    grouped: str
    compact: str
    words: str
    rounded: float
    round_unit: str


def format_amount(amount: Number, options: Optional[RupiahOptions] = None) -> str:
    return format_grouped(amount, options)


def compact_amount(amount: Number) -> str:
    return to_compact(amount)


def spell_amount(amount: Number, uppercase: Optional[bool] = None, with_currency: bool = True) -> str:
    """Terbilang with the configured default casing when ``uppercase`` is None."""
    if uppercase is None:
        uppercase = get_settings().WORDS_UPPERCASE
    return to_words(amount, WordOptions(uppercase=uppercase, with_currency=with_currency))


def _round_unit(unit: Optional[str]) -> RoundUnit:
    if unit is None:
        return get_settings().DEFAULT_ROUND_UNIT
    try:
        return resolve_round_unit(unit)
    except ValueError:
        logger.info("Rejected round unit %r", unit)
        raise UnknownRoundUnit(str(unit)) from None


def round_amount(amount: Number, unit: Optional[str] = None) -> float:
    return round_to_clean(amount, _round_unit(unit))


def read_amount(text: str, mode: str = "auto") -> float:
    """Parse ``text``; ``auto`` understands compact units, ``plain`` does not.

    Raises :class:`UnparsableAmount` instead of returning None.
    """
    parser = parse_plain if mode == "plain" else parse_compact
    value = parser(text)
    if value is None:
        logger.info("Rejected amount text %r (mode=%s)", text, mode)
        raise UnparsableAmount(text)
    return value


def describe_amount(amount: Number, round_unit: Optional[str] = None) -> Dict[str, Any]:
    """Every representation of ``amount`` at once (receipt-style)."""
    unit = _round_unit(round_unit)
    description = AmountDescription(
        amount=float(amount),
        grouped=format_grouped(amount),
        compact=to_compact(amount),
        words=spell_amount(amount),
        rounded=round_to_clean(amount, unit),
        round_unit=unit.value,
    )
    return asdict(description)


__all__ = [
    "AmountDescription",
    "format_amount",
    "compact_amount",
    "spell_amount",
    "round_amount",
    "read_amount",
    "describe_amount",
]
