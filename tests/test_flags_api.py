"""
Flag read API tests (Flask test client).

Covers:
- GET /flags (+ inert applicationId)
- GET /flags/<key> (+ context, malformed context, 404)
- GET /flags/<key>/enabled end-to-end coercion
- POST /flags/refresh
"""

from __future__ import annotations
import json
import logging
from urllib.parse import quote


def test_list_flags(client):
    r = client.get("/flags")
    assert r.status_code == 200
    data = r.get_json()
    assert set(data) >= {"feature-new-ui", "feature-analytics", "max-items-per-page", "api-version"}
    flag = data["feature-new-ui"]
    assert set(flag) == {"value", "lastUpdated", "source"}
    assert isinstance(flag["lastUpdated"], str)
    assert flag["source"] == "bootstrap"


def test_list_flags_accepts_application_id(client):
    r = client.get("/flags?applicationId=my-app-123")
    assert r.status_code == 200
    assert "feature-new-ui" in r.get_json()
    assert r.get_json() == client.get("/flags").get_json()


def test_get_flag(client):
    r = client.get("/flags/feature-new-ui")
    assert r.status_code == 200
    data = r.get_json()
    assert data["value"] is True
    assert "lastUpdated" in data and "source" in data


def test_get_flag_preserves_value_types(client):
    assert client.get("/flags/max-items-per-page").get_json()["value"] == 50
    assert client.get("/flags/api-version").get_json()["value"] == "v2"
    assert client.get("/flags/feature-analytics").get_json()["value"] is False


def test_get_flag_not_found(client):
    r = client.get("/flags/non-existent-flag")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Flag not found"}


def test_get_flag_with_context(client):
    ctx = quote(json.dumps({"userId": "123", "country": "US"}))
    r = client.get(f"/flags/feature-new-ui?context={ctx}&applicationId=my-app-123")
    assert r.status_code == 200
    assert r.get_json()["value"] is True


def test_get_flag_with_malformed_context(client):
    r = client.get("/flags/feature-new-ui?context=%7Bnot-json")
    assert r.status_code == 200
    assert r.get_json()["value"] is True


def test_enabled_end_to_end(client):
    r = client.get("/flags/feature-new-ui/enabled")
    assert r.status_code == 200
    data = r.get_json()
    assert data["enabled"] is True
    assert data["source"] == "bootstrap"
    assert "lastUpdated" in data

    assert client.get("/flags/feature-analytics/enabled").get_json()["enabled"] is False
    # "v2" is not a truthy string
    assert client.get("/flags/api-version/enabled").get_json()["enabled"] is False
    # 50 != 0
    assert client.get("/flags/max-items-per-page/enabled").get_json()["enabled"] is True


def test_enabled_not_found(client):
    r = client.get("/flags/missing/enabled?context=garbage")
    assert r.status_code == 404
    assert r.get_json() == {"error": "Flag not found"}


def test_refresh_updates_all_timestamps(client):
    before = client.get("/flags/feature-new-ui").get_json()

    r = client.post("/flags/refresh?applicationId=my-app-123")
    assert r.status_code == 200
    out = r.get_json()
    assert out["refreshed"] is True
    assert isinstance(out["timestamp"], str)

    after = client.get("/flags/feature-new-ui").get_json()
    assert after["lastUpdated"] == out["timestamp"]
    assert after["lastUpdated"] >= before["lastUpdated"]
    assert after["value"] == before["value"]

    for key, flag in client.get("/flags").get_json().items():
        assert flag["lastUpdated"] == out["timestamp"], key
        assert flag["source"] == "bootstrap"


def test_response_carries_request_id(client):
    r = client.get("/flags", headers={"X-Request-ID": "req_abc"})
    assert r.headers["X-Request-ID"] == "req_abc"
    assert client.get("/flags").headers["X-Request-ID"].startswith("req_")


def test_unknown_route_and_method(client):
    assert client.get("/nope").get_json() == {"error": "not_found"}
    r = client.delete("/flags")
    assert r.status_code == 405
    assert r.get_json() == {"error": "method_not_allowed"}


def test_lookup_miss_is_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="Runtime")
    client.get("/flags/non-existent-flag")
    assert "Flag lookup miss: non-existent-flag" in caplog.messages
