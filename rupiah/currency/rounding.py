"""Rounding of amounts to clean Rupiah figures (ribu, ratus ribu, juta)."""
from __future__ import annotations

from typing import Union

from .format import round_half_away
from .types import Number, RoundUnit

__all__ = ["resolve_round_unit", "round_to_clean"]


def resolve_round_unit(unit: Union[RoundUnit, str]) -> RoundUnit:
    """Accept a RoundUnit or its key ("ribu", "ratus-ribu", "juta")."""
    if isinstance(unit, RoundUnit):
        return unit
    try:
        return RoundUnit(str(unit).strip().lower())
    except ValueError:
        allowed = ", ".join(u.value for u in RoundUnit)
        raise ValueError(f"Unknown round unit {unit!r}; expected one of: {allowed}") from None


def round_to_clean(amount: Number, unit: Union[RoundUnit, str] = RoundUnit.RIBU) -> float:
    """Round ``amount`` to the nearest multiple of ``unit``, halves away from zero.

    >>> round_to_clean(1234567, "ribu")
    1235000.0
    >>> round_to_clean(1234567, "ratus-ribu")
    1200000.0
    >>> round_to_clean(-1500, "ribu")
    -2000.0
    """
    divisor = resolve_round_unit(unit).divisor
    steps = round_half_away(amount / divisor, 0)
    return float(int(steps) * divisor)
