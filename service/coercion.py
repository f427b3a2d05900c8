"""
Boolean interpretation of flag values ("is this flag enabled?").

  boolean -> as is
  string  -> "true" (any case) or "1"
  number  -> non-zero (negatives, fractions and NaN count as on)
  other   -> False

Never raises; unknown kinds are simply off.
"""

from __future__ import annotations
from typing import Any

from store.flag_store import value_kind


def coerce(value: Any) -> bool:
    kind = value_kind(value)
    if kind == "boolean":
        return value
    if kind == "string":
        return value.lower() == "true" or value == "1"
    if kind == "number":
        return value != 0
    return False
