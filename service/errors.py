"""
Error taxonomy for flag reads and assignment.

- FlagServiceError: base; carries HTTP status + message for the API layer
- FlagNotFound (404), InvalidRequest (400), RequestValidationError (400)
- FlagValueError: bad seed data, raised at startup only

app/__init__.py maps FlagServiceError to {"error": message} JSON.
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from store.flag_store import FlagValueError  # noqa: F401

FLAG_NOT_FOUND = "Flag not found"
IDENTITY_REQUIRED = "Either userId or userAttributes must be provided"


class FlagServiceError(Exception):
    status: int = 500
    default_message: str = "server_error"

    def __init__(self, message: Optional[str] = None, *, detail: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.detail = detail

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.detail:
            body["detail"] = self.detail
        return body


class FlagNotFound(FlagServiceError):
    status = 404
    default_message = FLAG_NOT_FOUND

    def __init__(self, flag_key: str) -> None:
        super().__init__()
        self.flag_key = flag_key


class InvalidRequest(FlagServiceError):
    status = 400
    default_message = IDENTITY_REQUIRED


class RequestValidationError(FlagServiceError):
    status = 400
    default_message = "bad_request"
