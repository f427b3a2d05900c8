"""
Container — creates and holds the per-app singletons.

Provides:
- FlagStore (seeded from Settings.FLAGS_SEED_PATH or the built-in flags)
- FlagService (list / get / enabled / refresh)
- AssignmentEvaluator (user bucketing + attribute targeting)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from app.config import Settings
from service.assignment import AssignmentEvaluator
from service.flag_service import FlagService
from store.flag_store import FlagStore, utc_now_iso
from store.seed import load_seed_file

log = logging.getLogger("Runtime")


def build_store(settings: Settings) -> FlagStore:
    if settings.FLAGS_SEED_PATH:
        records = load_seed_file(settings.FLAGS_SEED_PATH, utc_now_iso())
        log.info(f"Seeded {len(records)} flags from {settings.FLAGS_SEED_PATH}")
        return FlagStore(records)
    return FlagStore.bootstrap()


@dataclass
class Container:
    settings: Settings
    store: Optional[FlagStore] = None

    def __post_init__(self):
        if self.store is None:
            self.store = build_store(self.settings)
        self.flags = FlagService(self.store)
        self.assignment = AssignmentEvaluator(
            self.store, default_flag_key=self.settings.DEFAULT_VARIATION_FLAG
        )
