"""Parsing of Rupiah text back into amounts.

Two entry points:
  - parse_plain(): grouped or plain digits ("Rp 1.500.000,50", "1,500,000.50")
  - parse_compact(): compact unit notation ("Rp 1,5 juta"), falling back to
    parse_plain() when no unit word is present

Both return ``None`` when the text cannot be read as a number; they never
raise for bad input.

Separator policy for parse_plain():
  1. both "." and "," present: the rightmost one is the decimal marker, every
     other separator is a thousands separator
  2. only ",": decimal marker if it splits the text in two and the tail has
     1-2 digits, otherwise thousands separators
  3. only ".": thousands separators if there are more than two segments or the
     tail has more than 2 digits, otherwise the decimal marker

A four digit value written as "1.234" therefore always reads as 1234.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Optional, Tuple

from .lexicon import COMPACT_ABBREVIATIONS, COMPACT_KEYWORDS

logger = logging.getLogger(__name__)

__all__ = ["parse_plain", "parse_compact", "canonicalize_separators"]

_DIGITS = "0123456789"
_PREFIX_RE = re.compile(r"^(?:rp\.?|idr)\s*")
_CANONICAL_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
_TRAILING_MARKERS = (",-", ".-")


def _split_sign(text: str) -> Tuple[str, str]:
    if text[:1] in ("-", "+"):
        return text[0], text[1:].lstrip()
    return "", text


def canonicalize_separators(text: str) -> str:
    """Rewrite ``text`` so that "." is the only (optional) decimal marker."""
    has_dot = "." in text
    has_comma = "," in text

    if has_dot and has_comma:
        last = max(text.rfind("."), text.rfind(","))
        head = text[:last].replace(".", "").replace(",", "")
        return head + "." + text[last + 1:]
    if has_comma:
        parts = text.split(",")
        if len(parts) == 2 and 1 <= len(parts[1]) <= 2:
            return text.replace(",", ".")
        return text.replace(",", "")
    if has_dot:
        parts = text.split(".")
        if len(parts) > 2 or (len(parts) == 2 and len(parts[1]) > 2):
            return text.replace(".", "")
    return text


def parse_plain(text: Any) -> Optional[float]:
    """Parse grouped or plain Rupiah text.

    >>> parse_plain("Rp 1.500.000,50")
    1500000.5
    >>> parse_plain("1,500,000.50")
    1500000.5
    >>> parse_plain("bukan angka") is None
    True
    """
    if not isinstance(text, str):
        return None
    cleaned = text.strip().lower()

    # The sign may sit before or after the currency prefix: "-Rp 5" / "Rp +5".
    sign, cleaned = _split_sign(cleaned)
    cleaned = _PREFIX_RE.sub("", cleaned, count=1)
    inner_sign, cleaned = _split_sign(cleaned)
    if sign and inner_sign:
        logger.debug("Rejected amount with two signs: %r", text)
        return None
    negative = "-" in (sign, inner_sign)

    if cleaned.endswith(_TRAILING_MARKERS):
        cleaned = cleaned[:-2]
    cleaned = "".join(cleaned.split())
    if not cleaned:
        return None

    canonical = canonicalize_separators(cleaned)
    if not _CANONICAL_RE.fullmatch(canonical):
        logger.debug("Unparsable amount text: %r (canonical %r)", text, canonical)
        return None
    value = float(canonical)
    return -value if negative else value


def _has_keyword(text: str, keyword: str) -> bool:
    if keyword not in COMPACT_ABBREVIATIONS:
        return keyword in text
    start = text.find(keyword)
    while start != -1:
        end = start + len(keyword)
        before = text[start - 1] if start > 0 else " "
        after = text[end] if end < len(text) else " "
        if not before.isalpha() and not after.isalpha():
            return True
        start = text.find(keyword, start + 1)
    return False


def _scan_number_token(text: str) -> Optional[str]:
    """Return the first ``-?digits[,.]?digits*`` run in ``text``."""
    start = next((i for i, ch in enumerate(text) if ch in _DIGITS), None)
    if start is None:
        return None
    begin = start - 1 if start > 0 and text[start - 1] == "-" else start
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    if end < len(text) and text[end] in ",.":
        end += 1
        while end < len(text) and text[end] in _DIGITS:
            end += 1
    return text[begin:end]


def parse_compact(text: Any) -> Optional[float]:
    """Parse compact notation such as "Rp 1,5 juta" or "500 rb".

    Unit words are searched in magnitude order (triliun, miliar, juta, ribu)
    and the first one present decides the multiplier, wherever it sits in the
    text. Text without a unit word is handed to :func:`parse_plain`.

    >>> parse_compact("Rp 1,5 juta")
    1500000.0
    >>> parse_compact("Rp 500 ribu")
    500000.0
    """
    if not isinstance(text, str):
        return None
    lowered = text.strip().lower()

    for keyword, multiplier in COMPACT_KEYWORDS:
        if not _has_keyword(lowered, keyword):
            continue
        token = _scan_number_token(lowered)
        if token is None:
            logger.debug("Unit %r without a number in %r", keyword, text)
            return None
        return float(token.replace(",", ".")) * multiplier

    return parse_plain(text)
