"""
Service package exports.

Exposes:
- coerce(value)                       -> bool
- parse_context(raw) / EvaluationContext
- AssignmentEvaluator, AssignmentResult, Variation
- FlagService (list / get / enabled / refresh)
- error types (FlagNotFound, InvalidRequest, ...)
"""

from __future__ import annotations

from .errors import (
    FlagNotFound,
    FlagServiceError,
    FlagValueError,
    InvalidRequest,
    RequestValidationError,
)
from .coercion import coerce
from .context import EvaluationContext, parse_context
from .assignment import (
    AssignmentEvaluator,
    AssignmentResult,
    Variation,
    attribute_assignment,
    hash_assignment,
    identity_bucket,
)
from .flag_service import FlagService

__all__ = [
    "AssignmentEvaluator",
    "AssignmentResult",
    "EvaluationContext",
    "FlagNotFound",
    "FlagService",
    "FlagServiceError",
    "FlagValueError",
    "InvalidRequest",
    "RequestValidationError",
    "Variation",
    "attribute_assignment",
    "coerce",
    "hash_assignment",
    "identity_bucket",
    "parse_context",
]
