"""
Middleware installers for Flask.

- Request ID injection (X-Request-ID in / out)
- Request timing -> Runtime logger
"""

from __future__ import annotations
import logging
import time
import uuid

from flask import Flask, g, request

log = logging.getLogger("Runtime")


def install_request_id(app: Flask) -> None:
    @app.before_request
    def _req_id():
        g.request_id = request.headers.get("X-Request-ID") or f"req_{uuid.uuid4().hex[:12]}"

    @app.after_request
    def _stamp(response):
        response.headers["X-Request-ID"] = g.get("request_id", "-")
        return response


def install_timing(app: Flask) -> None:
    @app.before_request
    def _start_timer():
        g._t0 = time.time()

    @app.after_request
    def _stop_timer(response):
        t0 = g.get("_t0")
        if t0 is not None:
            dt = int((time.time() - t0) * 1000)
            log.info("%s %s %s %dms", request.method, request.path, response.status_code, dt)
        return response
