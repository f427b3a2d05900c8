"""
Evaluation context.

- parse_context(): lenient decode of the `context` query string
- EvaluationContext: user id and/or attributes for one evaluation

A malformed context is treated as empty and not reported anywhere.
"""

from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


def parse_context(raw: Optional[str]) -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (TypeError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


@dataclass
class EvaluationContext:
    user_id: Optional[str] = None
    user_attributes: Optional[Dict[str, Any]] = None

    @property
    def has_user_id(self) -> bool:
        return isinstance(self.user_id, str) and bool(self.user_id)

    @property
    def has_attributes(self) -> bool:
        # an empty mapping still counts as supplied
        return self.user_attributes is not None

    @property
    def has_identity(self) -> bool:
        return self.has_user_id or self.has_attributes

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "EvaluationContext":
        """Assignment body: {"userId"?: str, "userAttributes"?: {...}}"""
        attrs = payload.get("userAttributes")
        return cls(
            user_id=payload.get("userId"),
            user_attributes=dict(attrs) if isinstance(attrs, Mapping) else None,
        )

    @classmethod
    def from_context(cls, ctx: Mapping[str, Any]) -> "EvaluationContext":
        """
        Parsed `context` blob. Accepts {"userId", "userAttributes"} or a flat
        object whose other keys are read as attributes.
        """
        user_id = ctx.get("userId")
        attrs = ctx.get("userAttributes")
        if not isinstance(attrs, Mapping):
            flat = {k: v for k, v in ctx.items() if k != "userId"}
            attrs = flat or None
        return cls(
            user_id=user_id if isinstance(user_id, str) else None,
            user_attributes=dict(attrs) if attrs is not None else None,
        )
