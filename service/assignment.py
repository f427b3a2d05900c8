"""
Assignment: is this user "in" a rollout / experiment?

Decision rules (deterministic, stateless):
- userId given     -> identity hash: sum of UTF-16 code units, even => assigned
- userAttributes   -> country == "US" OR plan == "premium"
- both given       -> userId wins
- neither          -> InvalidRequest

The hash is intentionally coarse (roughly a 50/50 split, not uniform). It sits
behind identity_bucket() so it can be swapped without touching callers.

Forms:
- assign_for_flag(key, ctx)  -> {"assigned"}
- variation_for(ctx)         -> fixed demo variation for the default flag + "assigned"
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from service.coercion import coerce
from service.context import EvaluationContext
from service.errors import FlagNotFound, InvalidRequest
from store.flag_store import FlagRecord, FlagStore, FlagValue

DEFAULT_VARIATION_FLAG = "feature-new-ui"
DEFAULT_REASON = "DEFAULT"


def identity_bucket(user_id: str) -> int:
    # Same numbers as JavaScript's charCodeAt: astral chars count as two surrogates.
    data = user_id.encode("utf-16-le", "surrogatepass")
    return sum(int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2))


def hash_assignment(user_id: str) -> bool:
    return identity_bucket(user_id) % 2 == 0


def attribute_assignment(attributes: Mapping[str, Any]) -> bool:
    return attributes.get("country") == "US" or attributes.get("plan") == "premium"


@dataclass(frozen=True)
class Variation:
    flag_key: str
    value: FlagValue
    variation: str
    reason: str
    last_updated: str
    source: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "flagKey": self.flag_key,
            "value": self.value,
            "variation": self.variation,
            "reason": self.reason,
            "lastUpdated": self.last_updated,
            "source": self.source,
        }


@dataclass(frozen=True)
class AssignmentResult:
    assigned: bool
    variation: Optional[Variation] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = self.variation.to_dict() if self.variation else {}
        out["assigned"] = self.assigned
        return out


class AssignmentEvaluator:
    def __init__(self, store: FlagStore, default_flag_key: str = DEFAULT_VARIATION_FLAG):
        self.store = store
        self.default_flag_key = default_flag_key

    def assign(self, ctx: EvaluationContext) -> bool:
        if ctx.has_user_id:
            return hash_assignment(ctx.user_id)  # type: ignore[arg-type]
        if ctx.has_attributes:
            return attribute_assignment(ctx.user_attributes or {})
        raise InvalidRequest()

    def _resolve(self, flag_key: str) -> FlagRecord:
        rec = self.store.get(flag_key)
        if rec is None:
            raise FlagNotFound(flag_key)
        return rec

    def assign_for_flag(
        self,
        flag_key: str,
        ctx: EvaluationContext,
        application_id: Optional[str] = None,
    ) -> AssignmentResult:
        # identity is checked before the flag lookup: bad body beats unknown flag
        if not ctx.has_identity:
            raise InvalidRequest()
        self._resolve(flag_key)
        return AssignmentResult(assigned=self.assign(ctx))

    def variation_for(
        self, ctx: EvaluationContext, application_id: Optional[str] = None
    ) -> AssignmentResult:
        if not ctx.has_identity:
            raise InvalidRequest()
        rec = self._resolve(self.default_flag_key)
        variation = Variation(
            flag_key=rec.key,
            value=rec.value,
            variation="on" if coerce(rec.value) else "off",
            reason=DEFAULT_REASON,
            last_updated=rec.last_updated,
            source=rec.source,
        )
        return AssignmentResult(assigned=self.assign(ctx), variation=variation)
