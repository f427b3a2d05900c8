"""
Feature Flag Service — Python Client

Purpose:
- Thin wrapper around /flags and /assignment.
- Stateless; pass application_id once and it rides along on every call.

Dependencies:
- requests

Typical usage:
    from sdk import FlagsClient
    c = FlagsClient(base_url="http://localhost:3000", application_id="web")
    if c.is_enabled("feature-new-ui"):
        ...
    c.assign(user_id="user-123", flag_key="feature-new-ui")  # {"assigned": True}
"""

from __future__ import annotations
import json
from typing import Any, Dict, Optional
import requests


def _quote(key: str) -> str:
    # keys are a single path segment
    return requests.utils.quote(key, safe="")


class FlagsClientError(Exception):
    def __init__(self, status: int, error: str) -> None:
        super().__init__(f"{status}: {error}")
        self.status = status
        self.error = error


class FlagsClient:
    def __init__(
        self,
        base_url: str,
        application_id: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        :param base_url: Server root (e.g., http://localhost:3000)
        :param application_id: Optional applicationId sent as a query param
        :param timeout: Request timeout in seconds
        :param session: Optional preconfigured requests.Session
        """
        self.base_url = base_url.rstrip("/")
        self.application_id = application_id
        self.timeout = timeout
        self._session = session or requests.Session()

    # -------- Flags --------
    def list_flags(self) -> Dict[str, Dict[str, Any]]:
        return self._request("GET", "/flags")

    def get_flag(self, key: str, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._request("GET", f"/flags/{_quote(key)}", params=self._context_params(context))

    def is_enabled(self, key: str, context: Optional[Dict[str, Any]] = None) -> bool:
        out = self._request("GET", f"/flags/{_quote(key)}/enabled", params=self._context_params(context))
        return bool(out.get("enabled"))

    def refresh(self) -> Dict[str, Any]:
        return self._request("POST", "/flags/refresh")

    # -------- Assignment --------
    def assign(
        self,
        user_id: Optional[str] = None,
        user_attributes: Optional[Dict[str, Any]] = None,
        flag_key: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Without flag_key: variation descriptor (+ assigned).
        With flag_key: {"assigned": bool}.
        """
        payload: Dict[str, Any] = {}
        if user_id is not None:
            payload["userId"] = user_id
        if user_attributes is not None:
            payload["userAttributes"] = user_attributes
        path = f"/assignment/{_quote(flag_key)}" if flag_key else "/assignment"
        return self._request("POST", path, json=payload)

    # -------- Helpers --------
    @staticmethod
    def _context_params(context: Optional[Dict[str, Any]]) -> Dict[str, str]:
        return {"context": json.dumps(context)} if context else {}

    def _request(self, method: str, path: str, params: Optional[Dict[str, str]] = None, **kw: Any) -> Any:
        q = dict(params or {})
        if self.application_id:
            q["applicationId"] = self.application_id
        resp = self._session.request(
            method,
            f"{self.base_url}{path}",
            params=q or None,
            timeout=self.timeout,
            **kw,
        )
        if resp.status_code >= 400:
            try:
                error = (resp.json() or {}).get("error") or resp.reason
            except ValueError:
                error = resp.text or resp.reason
            raise FlagsClientError(resp.status_code, str(error))
        return resp.json()
