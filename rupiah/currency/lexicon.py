"""Static Indonesian number words and magnitude tables.

Loaded once at import time and never mutated; every table is a tuple or a
read-only mapping.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# Index 0 is empty: zero digits contribute no word inside a group.
DIGITS: Tuple[str, ...] = (
    "",
    "satu",
    "dua",
    "tiga",
    "empat",
    "lima",
    "enam",
    "tujuh",
    "delapan",
    "sembilan",
)

# 10..19, indexed by n - 10
TEENS: Tuple[str, ...] = (
    "sepuluh",
    "sebelas",
    "dua belas",
    "tiga belas",
    "empat belas",
    "lima belas",
    "enam belas",
    "tujuh belas",
    "delapan belas",
    "sembilan belas",
)

# Indexed by the tens digit; 0 and 1 are handled by DIGITS/TEENS.
TENS: Tuple[str, ...] = (
    "",
    "",
    "dua puluh",
    "tiga puluh",
    "empat puluh",
    "lima puluh",
    "enam puluh",
    "tujuh puluh",
    "delapan puluh",
    "sembilan puluh",
)

ZERO_WORD = "nol"
NEGATIVE_WORD = "minus"
CURRENCY_WORD = "rupiah"
CURRENCY_SYMBOL = "Rp"

HUNDRED_WORD = "ratus"
HUNDRED_SINGLE = "seratus"
THOUSAND_SINGLE = "seribu"

RIBU = 1_000
JUTA = 1_000_000
MILIAR = 1_000_000_000
TRILIUN = 1_000_000_000_000

ROUND_UNITS: Mapping[str, int] = MappingProxyType({
    "ribu": RIBU,
    "ratus-ribu": 100 * RIBU,
    "juta": JUTA,
})

# Keyword scan order for compact parsing; the first keyword present wins.
COMPACT_KEYWORDS: Tuple[Tuple[str, int], ...] = (
    ("triliun", TRILIUN),
    ("miliar", MILIAR),
    ("milyar", MILIAR),
    ("juta", JUTA),
    ("jt", JUTA),
    ("ribu", RIBU),
    ("rb", RIBU),
)

# Abbreviations only match as standalone tokens (not inside other words).
COMPACT_ABBREVIATIONS = frozenset({"jt", "rb"})

# Below this the compact encoder falls back to grouped digits instead of "ribu".
COMPACT_RIBU_THRESHOLD = 100 * RIBU

__all__ = [
    "DIGITS",
    "TEENS",
    "TENS",
    "ZERO_WORD",
    "NEGATIVE_WORD",
    "CURRENCY_WORD",
    "CURRENCY_SYMBOL",
    "HUNDRED_WORD",
    "HUNDRED_SINGLE",
    "THOUSAND_SINGLE",
    "RIBU",
    "JUTA",
    "MILIAR",
    "TRILIUN",
    "ROUND_UNITS",
    "COMPACT_KEYWORDS",
    "COMPACT_ABBREVIATIONS",
    "COMPACT_RIBU_THRESHOLD",
]
