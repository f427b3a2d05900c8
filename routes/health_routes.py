from __future__ import annotations
from flask import Blueprint, current_app, jsonify
from app.config import APP_NAME, APP_VERSION, Settings
from routes import get_container

bp = Blueprint("health", __name__)

@bp.get("/health")
def health():
    # lightweight liveness
    return "ok", 200, {"Content-Type": "text/plain; charset=utf-8"}

@bp.get("/version")
def version():
    s: Settings = current_app.config.get("SETTINGS") or get_container().settings
    return jsonify({"name": APP_NAME, "version": APP_VERSION, "env": s.ENV})

@bp.get("/ready")
def ready():
    c = get_container()
    return jsonify({"ready": True, "flags": len(c.store)}), 200
