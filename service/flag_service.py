"""
Flag read use cases over a FlagStore.

- list_flags / get_flag: raw records
- enabled: boolean view via service.coercion
- refresh: re-stamp every record (no upstream provider yet)

`application_id` and `context` are accepted and currently ignored; they are
the hooks for per-application scoping and targeting.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional

from service.coercion import coerce
from service.context import EvaluationContext
from service.errors import FlagNotFound
from store.flag_store import FlagRecord, FlagStore, utc_now_iso

log = logging.getLogger("Runtime")


class FlagService:
    def __init__(self, store: FlagStore, clock: Callable[[], str] = utc_now_iso):
        self.store = store
        self.clock = clock

    def list_flags(self, application_id: Optional[str] = None) -> Dict[str, FlagRecord]:
        return self.store.list()

    def get_flag(
        self,
        flag_key: str,
        application_id: Optional[str] = None,
        context: Optional[EvaluationContext] = None,
    ) -> FlagRecord:
        rec = self.store.get(flag_key)
        if rec is None:
            log.info(f"Flag lookup miss: {flag_key}")
            raise FlagNotFound(flag_key)
        return rec

    def enabled(
        self,
        flag_key: str,
        application_id: Optional[str] = None,
        context: Optional[EvaluationContext] = None,
    ) -> Dict[str, Any]:
        rec = self.get_flag(flag_key, application_id, context)
        return {
            "enabled": coerce(rec.value),
            "lastUpdated": rec.last_updated,
            "source": rec.source,
        }

    def refresh(self, application_id: Optional[str] = None) -> Dict[str, Any]:
        timestamp = self.store.refresh_now(self.clock)
        log.info(f"Refreshed {len(self.store)} flags at {timestamp}")
        return {"refreshed": True, "timestamp": timestamp}
