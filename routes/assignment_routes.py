from __future__ import annotations
from flask import Blueprint, jsonify, request
from routes import application_id, get_container
from service.context import EvaluationContext
from service.validators import validate_assignment_body

bp = Blueprint("assignment", __name__, url_prefix="/assignment")


def _body() -> dict:
    # missing / non-JSON body behaves like {}
    data = request.get_json(force=True, silent=True)
    return validate_assignment_body({} if data is None else data)


@bp.post("")
def assign_variation():
    """
    Contract:
    { "userId": str? , "userAttributes": {}? , "applicationId": str? }
    Returns:
    { flagKey, value, variation, reason, lastUpdated, source, assigned }
    """
    c = get_container()
    data = _body()
    ctx = EvaluationContext.from_payload(data)
    result = c.assignment.variation_for(ctx, application_id=application_id(data))
    return jsonify(result.to_dict())


@bp.post("/<flag_key>")
def assign_flag(flag_key: str):
    """
    Same body as POST /assignment. Returns: { assigned: bool }
    400 when no identity is given (checked before the flag lookup), 404 for unknown flags.
    """
    c = get_container()
    data = _body()
    ctx = EvaluationContext.from_payload(data)
    result = c.assignment.assign_for_flag(flag_key, ctx, application_id=application_id(data))
    return jsonify(result.to_dict())
