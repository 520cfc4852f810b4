"""Option records and unit enums shared by the currency codec."""
from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union

from .lexicon import JUTA, MILIAR, RIBU, ROUND_UNITS, TRILIUN

Number = Union[int, float, Decimal]


class MagnitudeUnit(Enum):
    """Scale words used by compact notation and terbilang, largest first."""

    TRILIUN = TRILIUN
    MILIAR = MILIAR
    JUTA = JUTA
    RIBU = RIBU

    @property
    def word(self) -> str:
        return self.name.lower()

    @property
    def divisor(self) -> int:
        return self.value


class RoundUnit(str, Enum):
    """Granularity accepted by :func:`rupiah.currency.rounding.round_to_clean`."""

    RIBU = "ribu"
    RATUS_RIBU = "ratus-ribu"
    JUTA = "juta"

    @property
    def divisor(self) -> int:
        return ROUND_UNITS[self.value]


@dataclass(frozen=True)
class RupiahOptions:
    """Grouped-notation formatting options.

    ``precision`` left as ``None`` resolves to 2 when ``decimal`` is on and 0
    otherwise.
    """

    symbol: bool = True
    decimal: bool = False
    precision: Optional[int] = None
    separator: str = "."
    decimal_separator: str = ","
    space_after_symbol: bool = True

    @property
    def effective_precision(self) -> int:
        if self.precision is not None:
            return self.precision
        return 2 if self.decimal else 0

    def merged(self, **overrides: Any) -> "RupiahOptions":
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class WordOptions:
    uppercase: bool = False
    with_currency: bool = True

    def merged(self, **overrides: Any) -> "WordOptions":
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


__all__ = ["Number", "MagnitudeUnit", "RoundUnit", "RupiahOptions", "WordOptions"]
