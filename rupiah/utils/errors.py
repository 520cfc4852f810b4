"""Centralized error response helpers and domain exceptions.

The codec reports unreadable text as ``None``; these exceptions exist for the
service layer, which has to turn that into an HTTP/CLI failure.
"""
from __future__ import annotations
from typing import Any, Dict
import time

ERROR_CODES = {
    "validation": "VALIDATION_ERROR",
    "parse_invalid": "PARSE_INVALID",
    "unknown_unit": "UNKNOWN_UNIT",
    "http": "HTTP_ERROR",
    "internal": "INTERNAL_SERVER_ERROR",
}


def error_payload(code: str, message: str, details: Any | None = None, path: str | None = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "status": "error",
        "error": {
            "code": code,
            "message": message,
        },
        "timestamp": time.time(),
    }
    if details is not None:
        payload["error"]["details"] = details
    if path:
        payload["path"] = path
    return payload


class DomainError(Exception):
    """Base domain error storing standardized fields."""

    def __init__(self, code: str, message: str, details: Any | None = None):  # noqa: D401
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class UnparsableAmount(DomainError):
    def __init__(self, text: str):
        super().__init__(
            ERROR_CODES["parse_invalid"], f"Could not read an amount from {text!r}", details={"text": text})


class UnknownRoundUnit(DomainError):
    def __init__(self, unit: str):
        super().__init__(ERROR_CODES["unknown_unit"], f"Unknown round unit {unit!r}", details={"unit": unit})


__all__ = [
    "ERROR_CODES",
    "error_payload",
    "DomainError",
    "UnparsableAmount",
    "UnknownRoundUnit",
]
