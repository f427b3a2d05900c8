"""
API documentation.

- GET /openapi.json : OpenAPI 3.1 document for the flag + assignment routes
- GET /docs         : Swagger UI (CDN assets), only when Settings.ENABLE_DOCS
"""

from __future__ import annotations
from typing import Any, Dict

from flask import Blueprint, abort, jsonify, render_template_string

from app.config import APP_NAME, APP_VERSION
from routes import get_container
from service.errors import FLAG_NOT_FOUND, IDENTITY_REQUIRED
from service.validators import ASSIGNMENT_BODY_SCHEMA

bp = Blueprint("docs", __name__)

_FLAG_VALUE = {
    "oneOf": [
        {"type": "boolean"},
        {"type": "number"},
        {"type": "string"},
        {"type": "object"},
    ]
}

_FLAG = {
    "type": "object",
    "properties": {
        "value": _FLAG_VALUE,
        "lastUpdated": {"type": "string", "format": "date-time"},
        "source": {"type": "string"},
    },
}

_ERROR = {"type": "object", "properties": {"error": {"type": "string"}}}

_APP_ID = {
    "name": "applicationId",
    "in": "query",
    "required": False,
    "description": "Application identifier to scope flags",
    "schema": {"type": "string"},
}
_CONTEXT = {
    "name": "context",
    "in": "query",
    "required": False,
    "description": "JSON-encoded context (userId, country, etc.)",
    "schema": {"type": "string"},
}
_FLAG_KEY = {"name": "flagKey", "in": "path", "required": True, "schema": {"type": "string"}}


def _json(schema: Dict[str, Any], description: str) -> Dict[str, Any]:
    return {"description": description, "content": {"application/json": {"schema": schema}}}


def _error(example: str) -> Dict[str, Any]:
    resp = _json(_ERROR, example)
    resp["content"]["application/json"]["example"] = {"error": example}
    return resp


def build_openapi(base_url: str) -> Dict[str, Any]:
    assignment_body = {
        "required": False,
        "content": {"application/json": {"schema": ASSIGNMENT_BODY_SCHEMA}},
    }
    return {
        "openapi": "3.1.0",
        "info": {
            "title": APP_NAME,
            "version": APP_VERSION,
            "description": "Provider-agnostic feature flag API",
        },
        "servers": [{"url": base_url}],
        "paths": {
            "/flags": {
                "get": {
                    "description": "List all loaded flags",
                    "parameters": [_APP_ID],
                    "responses": {
                        "200": _json({"type": "object", "additionalProperties": _FLAG}, "All flags by key"),
                    },
                }
            },
            "/flags/{flagKey}": {
                "get": {
                    "description": "Get value for a specific flag",
                    "parameters": [_FLAG_KEY, _APP_ID, _CONTEXT],
                    "responses": {"200": _json(_FLAG, "Flag record"), "404": _error(FLAG_NOT_FOUND)},
                }
            },
            "/flags/{flagKey}/enabled": {
                "get": {
                    "description": "Check if a flag is enabled (boolean)",
                    "parameters": [_FLAG_KEY, _APP_ID, _CONTEXT],
                    "responses": {
                        "200": _json(
                            {
                                "type": "object",
                                "properties": {
                                    "enabled": {"type": "boolean"},
                                    "lastUpdated": {"type": "string", "format": "date-time"},
                                    "source": {"type": "string"},
                                },
                            },
                            "Boolean view of the flag",
                        ),
                        "404": _error(FLAG_NOT_FOUND),
                    },
                }
            },
            "/flags/refresh": {
                "post": {
                    "description": "Refresh flag cache",
                    "parameters": [_APP_ID],
                    "responses": {
                        "200": _json(
                            {
                                "type": "object",
                                "properties": {
                                    "refreshed": {"type": "boolean"},
                                    "timestamp": {"type": "string", "format": "date-time"},
                                },
                            },
                            "Refresh result",
                        ),
                    },
                }
            },
            "/assignment": {
                "post": {
                    "description": "Get a variation for a user",
                    "parameters": [_APP_ID],
                    "requestBody": assignment_body,
                    "responses": {
                        "200": _json(
                            {
                                "type": "object",
                                "properties": {
                                    "flagKey": {"type": "string"},
                                    "value": _FLAG_VALUE,
                                    "variation": {"type": "string"},
                                    "reason": {"type": "string"},
                                    "lastUpdated": {"type": "string", "format": "date-time"},
                                    "source": {"type": "string"},
                                    "assigned": {"type": "boolean"},
                                },
                            },
                            "Variation descriptor",
                        ),
                        "400": _error(IDENTITY_REQUIRED),
                    },
                }
            },
            "/assignment/{flagKey}": {
                "post": {
                    "description": "Check if a user is assigned to a feature flag",
                    "parameters": [_FLAG_KEY, _APP_ID],
                    "requestBody": assignment_body,
                    "responses": {
                        "200": _json(
                            {"type": "object", "properties": {"assigned": {"type": "boolean"}}},
                            "Assignment decision",
                        ),
                        "400": _error(IDENTITY_REQUIRED),
                        "404": _error(FLAG_NOT_FOUND),
                    },
                }
            },
        },
    }


_SWAGGER_HTML = """<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>{{ title }}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>
    SwaggerUIBundle({url: "{{ spec_url }}", dom_id: "#swagger-ui", docExpansion: "list", deepLinking: false});
  </script>
</body>
</html>
"""


@bp.get("/openapi.json")
def openapi():
    c = get_container()
    return jsonify(build_openapi(c.settings.BASE_URL))


@bp.get("/docs")
def docs():
    c = get_container()
    if not c.settings.ENABLE_DOCS:
        abort(404)
    return render_template_string(_SWAGGER_HTML, title=APP_NAME, spec_url="/openapi.json")
