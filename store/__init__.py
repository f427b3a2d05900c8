"""
Store package exports.

- FlagRecord / FlagStore: in-memory flag registry
- default_records / load_seed_file: bootstrap data
"""

from __future__ import annotations

from .flag_store import BOOTSTRAP_SOURCE, FlagRecord, FlagStore, FlagValue, utc_now_iso, value_kind
from .seed import DEFAULT_FLAGS, default_records, load_seed_file

__all__ = [
    "BOOTSTRAP_SOURCE",
    "DEFAULT_FLAGS",
    "FlagRecord",
    "FlagStore",
    "FlagValue",
    "default_records",
    "load_seed_file",
    "utc_now_iso",
    "value_kind",
]
