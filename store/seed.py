"""
Seed data for the flag store.

- default_records(): the four bootstrap flags
- load_seed_file(): optional JSON/YAML file replacing the defaults

Seed file shape (either form per key):
{
  "feature-new-ui": true,
  "max-items-per-page": {"value": 50, "source": "ops"}
}
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List

from store.flag_store import BOOTSTRAP_SOURCE, FlagRecord, FlagValueError

DEFAULT_FLAGS: Dict[str, Any] = {
    "feature-new-ui": True,
    "feature-analytics": False,
    "max-items-per-page": 50,
    "api-version": "v2",
}


def default_records(timestamp: str) -> List[FlagRecord]:
    return [
        FlagRecord(key=key, value=value, last_updated=timestamp, source=BOOTSTRAP_SOURCE)
        for key, value in DEFAULT_FLAGS.items()
    ]


def _read_seed(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as f:
        if path.suffix in (".yaml", ".yml"):
            import yaml  # lazy import

            return yaml.safe_load(f)
        return json.load(f)


def load_seed_file(path: str, timestamp: str) -> List[FlagRecord]:
    p = Path(path)
    if not p.exists():
        raise FlagValueError(f"Seed file not found: {path}")
    data = _read_seed(p)
    if not isinstance(data, dict):
        raise FlagValueError(f"Seed file must hold an object of flags: {path}")

    records: List[FlagRecord] = []
    for key, entry in data.items():
        if isinstance(entry, dict) and "value" in entry:
            value = entry["value"]
            source = str(entry.get("source") or BOOTSTRAP_SOURCE)
        else:
            value, source = entry, BOOTSTRAP_SOURCE
        records.append(FlagRecord(key=str(key), value=value, last_updated=timestamp, source=source))
    return records
