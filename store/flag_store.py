"""
FlagStore
- Holds flag key -> FlagRecord for the lifetime of the process
- Lookup, snapshot listing, bulk refresh of lastUpdated
- Records are frozen; refresh swaps whole records, never mutates fields

Wire shape of a record (GET /flags/{key}):
{
  "value": true | 50 | "v2" | {...},
  "lastUpdated": "2026-10-19T12:00:00.000Z",
  "source": "bootstrap"
}

Used by:
- service/flag_service.py (read / enabled / refresh)
- service/assignment.py (flag resolution before assignment)
"""

from __future__ import annotations
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

FlagValue = Union[bool, int, float, str, Dict[str, Any]]

BOOTSTRAP_SOURCE = "bootstrap"


class FlagValueError(TypeError):
    pass


def utc_now_iso() -> str:
    # Millisecond precision with Z suffix, e.g. 2026-10-19T12:00:00.000Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def value_kind(value: Any) -> Optional[str]:
    """
    Tag for a flag value: boolean | number | string | object.
    Returns None for anything a flag cannot hold.
    """
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    return None


@dataclass(frozen=True)
class FlagRecord:
    key: str
    value: FlagValue
    last_updated: str
    source: str = BOOTSTRAP_SOURCE

    def __post_init__(self):
        if not isinstance(self.key, str) or not self.key:
            raise FlagValueError(f"Flag key must be a non-empty string: {self.key!r}")
        if value_kind(self.value) is None:
            raise FlagValueError(
                f"Unsupported value for flag {self.key!r}: {type(self.value).__name__}"
            )

    @property
    def kind(self) -> str:
        return value_kind(self.value)  # type: ignore[return-value]

    def touched(self, timestamp: str) -> "FlagRecord":
        return replace(self, last_updated=timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "lastUpdated": self.last_updated,
            "source": self.source,
        }


class FlagStore:
    def __init__(self, records: Iterable[FlagRecord] = ()):
        self._flags: Dict[str, FlagRecord] = {}
        # single mutation point; readers never take it
        self._write_lock = threading.Lock()
        for rec in records:
            if rec.key in self._flags:
                raise FlagValueError(f"Duplicate flag key: {rec.key}")
            self._flags[rec.key] = rec

    @classmethod
    def bootstrap(cls, timestamp: Optional[str] = None) -> "FlagStore":
        from store.seed import default_records  # avoid import cycle

        return cls(default_records(timestamp or utc_now_iso()))

    # -------- reads --------

    def get(self, key: str) -> Optional[FlagRecord]:
        return self._flags.get(key)

    def list(self) -> Dict[str, FlagRecord]:
        return dict(self._flags)

    def keys(self) -> List[str]:
        return list(self._flags)

    def __contains__(self, key: object) -> bool:
        return key in self._flags

    def __len__(self) -> int:
        return len(self._flags)

    # -------- writes --------

    def refresh_all(self, timestamp: str) -> None:
        """
        Stamp every record with `timestamp`. value/source are carried over.
        Concurrent readers see the old or the new record per key, never a mix
        of fields.
        """
        with self._write_lock:
            for key, rec in list(self._flags.items()):
                self._flags[key] = rec.touched(timestamp)

    def refresh_now(self, clock: Callable[[], str]) -> str:
        """
        Read `clock()` under the write lock and stamp every record with it.
        Stamps land in lock order, so lastUpdated never moves backwards.
        Returns the stamp written.
        """
        with self._write_lock:
            timestamp = clock()
            for key, rec in list(self._flags.items()):
                self._flags[key] = rec.touched(timestamp)
        return timestamp
