"""
Health check verification against the in-process app.
"""
from tests.lib import MoodGardenApiClient


def _get_health(api_client: MoodGardenApiClient):
    response = api_client.request("GET", "/health")
    assert response.status_code == 200
    return response.json()


def test_health_endpoint_reports_status(api_client: MoodGardenApiClient):
    payload = _get_health(api_client)

    assert payload["status"] == "ok"
    assert payload["message"] == "Mood Garden API is running"
    assert payload["database"] == "connected"


def test_health_timestamp_format(api_client: MoodGardenApiClient):
    """Timestamp should be ISO 8601 formatted in UTC."""
    timestamp = _get_health(api_client)["timestamp"]

    assert "T" in timestamp
    assert timestamp.endswith("Z")


def test_responses_carry_request_id(api_client: MoodGardenApiClient):
    response = api_client.request("GET", "/health")

    assert response.headers.get("x-request-id")
    assert "x-process-time" in response.headers


def test_cors_allows_any_origin_by_default(api_client: MoodGardenApiClient):
    response = api_client.request(
        "GET", "/health", headers={"Origin": "http://localhost:3000"}
    )

    assert response.headers.get("access-control-allow-origin") == "*"
