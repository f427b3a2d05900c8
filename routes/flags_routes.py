from __future__ import annotations
from flask import Blueprint, jsonify, request
from routes import application_id, get_container
from service.context import EvaluationContext, parse_context

bp = Blueprint("flags", __name__, url_prefix="/flags")


def _context() -> EvaluationContext:
    # malformed JSON degrades to an empty context
    return EvaluationContext.from_context(parse_context(request.args.get("context")))


@bp.get("")
def list_flags():
    c = get_container()
    flags = c.flags.list_flags(application_id=application_id())
    return jsonify({key: rec.to_dict() for key, rec in flags.items()})


@bp.get("/<flag_key>")
def get_flag(flag_key: str):
    c = get_container()
    rec = c.flags.get_flag(flag_key, application_id=application_id(), context=_context())
    return jsonify(rec.to_dict())


@bp.get("/<flag_key>/enabled")
def flag_enabled(flag_key: str):
    c = get_container()
    return jsonify(c.flags.enabled(flag_key, application_id=application_id(), context=_context()))


@bp.post("/refresh")
def refresh_flags():
    """
    Re-stamps every flag's lastUpdated. A real provider fetch would hook in here.
    Returns: { refreshed: true, timestamp: ISO-8601 }
    """
    c = get_container()
    return jsonify(c.flags.refresh(application_id=application_id()))
