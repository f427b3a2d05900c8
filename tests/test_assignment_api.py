"""
Assignment API tests.

Covers:
- POST /assignment variation descriptor (userId / userAttributes)
- POST /assignment/<key> decisions
- 400 for missing identity (before 404), 404 for unknown flags
- Body schema violations and non-JSON bodies
"""

from __future__ import annotations
import json

IDENTITY_ERROR = {"error": "Either userId or userAttributes must be provided"}


def post(client, url, body=None, **kw):
    return client.post(
        url,
        data=json.dumps(body) if body is not None else None,
        headers={"Content-Type": "application/json"},
        **kw,
    )


def test_variation_with_user_id(client):
    r = post(client, "/assignment?applicationId=my-app-123", {"userId": "user-123"})
    assert r.status_code == 200
    data = r.get_json()
    for k in ("flagKey", "value", "variation", "reason", "lastUpdated", "source", "assigned"):
        assert k in data
    assert data["flagKey"] == "feature-new-ui"
    assert data["reason"] == "DEFAULT"
    assert data["assigned"] is True


def test_variation_with_attributes(client):
    r = post(client, "/assignment", {"userAttributes": {"country": "US", "plan": "free"}})
    assert r.status_code == 200
    data = r.get_json()
    assert data["value"] is True
    assert data["variation"] == "on"
    assert data["assigned"] is True


def test_variation_requires_identity(client):
    r = post(client, "/assignment?applicationId=my-app-123", {})
    assert r.status_code == 400
    assert r.get_json() == IDENTITY_ERROR


def test_variation_without_body(client):
    r = client.post("/assignment")
    assert r.status_code == 400
    assert r.get_json() == IDENTITY_ERROR


def test_flag_assignment_user_id(client):
    r = post(client, "/assignment/feature-new-ui?applicationId=my-app-123", {"userId": "user-123"})
    assert r.status_code == 200
    assert r.get_json() == {"assigned": True}


def test_flag_assignment_is_deterministic(client):
    first = post(client, "/assignment/feature-new-ui", {"userId": "user-124"}).get_json()
    second = post(client, "/assignment/feature-new-ui", {"userId": "user-124"}).get_json()
    assert first == second == {"assigned": False}


def test_flag_assignment_attributes(client):
    cases = [
        ({"country": "US", "plan": "free"}, True),
        ({"country": "CA", "plan": "premium"}, True),
        ({"country": "CA", "plan": "free"}, False),
        ({}, False),
    ]
    for attrs, expected in cases:
        r = post(client, "/assignment/feature-new-ui", {"userAttributes": attrs})
        assert r.status_code == 200
        assert r.get_json()["assigned"] is expected, attrs


def test_flag_assignment_application_id_in_body(client):
    r = post(client, "/assignment/feature-new-ui", {"applicationId": "web", "userId": "b"})
    assert r.get_json() == {"assigned": True}


def test_flag_assignment_requires_identity(client):
    r = post(client, "/assignment/feature-new-ui", {})
    assert r.status_code == 400
    assert r.get_json() == IDENTITY_ERROR


def test_flag_assignment_unknown_flag(client):
    r = post(client, "/assignment/non-existent-flag?applicationId=my-app-123", {"userId": "user-123"})
    assert r.status_code == 404
    assert r.get_json() == {"error": "Flag not found"}


def test_missing_identity_and_flag_is_400(client):
    r = post(client, "/assignment/non-existent-flag", {})
    assert r.status_code == 400
    assert r.get_json() == IDENTITY_ERROR


def test_empty_user_id_counts_as_missing(client):
    r = post(client, "/assignment/feature-new-ui", {"userId": ""})
    assert r.status_code == 400


def test_schema_violation(client):
    r = post(client, "/assignment/feature-new-ui", {"userId": 123})
    assert r.status_code == 400
    data = r.get_json()
    assert data["error"] == "bad_request"
    assert "detail" in data


def test_non_object_body(client):
    r = post(client, "/assignment", [1, 2, 3])
    assert r.status_code == 400
    assert r.get_json()["error"] == "bad_request"


def test_non_json_body_treated_as_empty(client):
    r = client.post("/assignment/feature-new-ui", data="userId=abc", headers={"Content-Type": "text/plain"})
    assert r.status_code == 400
    assert r.get_json() == IDENTITY_ERROR


def test_null_attributes_fall_back_to_user_id(client):
    # user-124 hashes odd, so a Form B match would flip the answer
    r = post(client, "/assignment/feature-new-ui", {"userId": "user-124", "userAttributes": None})
    assert r.status_code == 200
    assert r.get_json() == {"assigned": False}


def test_null_user_id_falls_back_to_attributes(client):
    r = post(client, "/assignment/feature-new-ui", {"userId": None, "userAttributes": {"country": "US"}})
    assert r.status_code == 200
    assert r.get_json() == {"assigned": True}


def test_both_identity_fields_null(client):
    r = post(client, "/assignment", {"userId": None, "userAttributes": None})
    assert r.status_code == 400
    assert r.get_json() == IDENTITY_ERROR
