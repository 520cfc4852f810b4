"""Shared API shape helpers (standard success envelope)."""
from __future__ import annotations
from typing import Any
import time


def success(data: Any, **meta) -> dict:
    return {"status": "success", "data": data, "meta": meta or None, "timestamp": time.time()}


__all__ = ["success"]
