"""
Route helpers.

Exports:
- get_container(): typed access to app.container
- application_id(): the inert `applicationId` parameter (query, then body)
"""

from __future__ import annotations
from typing import Any, Mapping, Optional

from flask import current_app, request

from app.container import Container

# ---- Container access ----

def get_container() -> Container:
    c = getattr(current_app, "container", None)
    if c is None:
        raise RuntimeError("Container not initialized on app")
    return c

# ---- applicationId (accepted everywhere, no effect yet) ----

def application_id(body: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    app_id = request.args.get("applicationId")
    if app_id is None and body:
        app_id = body.get("applicationId")
    return app_id
