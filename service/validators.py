"""
Request body validation.

Responsibilities:
- JSON schema for the assignment body (jsonschema)

Connects:
- routes/assignment_routes.py (body checks before evaluation)
- routes/docs_routes.py (schemas reused in the OpenAPI document)
"""

from __future__ import annotations
from typing import Any, Dict

import jsonschema

from service.errors import RequestValidationError

ASSIGNMENT_BODY_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "applicationId": {"type": "string", "description": "Application identifier"},
        "userId": {"type": ["string", "null"], "description": "User identifier (alternative to userAttributes)"},
        "userAttributes": {
            "type": ["object", "null"],
            "description": "User attributes object (alternative to userId)",
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}


def validate_assignment_body(data: Any) -> Dict[str, Any]:
    """
    Returns the body as a dict or raises RequestValidationError.
    Identity presence is not checked here (see service.assignment).
    """
    try:
        jsonschema.validate(instance=data, schema=ASSIGNMENT_BODY_SCHEMA)
    except jsonschema.ValidationError as e:
        raise RequestValidationError(detail=e.message) from e
    return data

