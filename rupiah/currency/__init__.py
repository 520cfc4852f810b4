"""Indonesian Rupiah codec.

Formatting (grouped and compact), parsing, terbilang and clean rounding. Every
function here is pure: no I/O, no configuration lookups, no shared state.
"""
from .format import format_grouped, group_digits, to_compact
from .parse import canonicalize_separators, parse_compact, parse_plain
from .rounding import resolve_round_unit, round_to_clean
from .types import MagnitudeUnit, RoundUnit, RupiahOptions, WordOptions
from .words import group_to_words, integer_to_words, to_words

__all__ = [
    "format_grouped",
    "group_digits",
    "to_compact",
    "canonicalize_separators",
    "parse_compact",
    "parse_plain",
    "resolve_round_unit",
    "round_to_clean",
    "MagnitudeUnit",
    "RoundUnit",
    "RupiahOptions",
    "WordOptions",
    "group_to_words",
    "integer_to_words",
    "to_words",
]
