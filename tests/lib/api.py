"""
Shared HTTP client utilities for the integration suite.

Provides a small wrapper around the in-process FastAPI test client with
high level helpers for the resources the integration tests exercise.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

import httpx
from fastapi.testclient import TestClient


API_PREFIX = "/api"


class MoodGardenApiError(RuntimeError):
    """Raised when an API call does not return an expected status code."""

    def __init__(self, method: str, path: str, status: int, body: str):
        super().__init__(f"{method} {path} returned {status}: {body}")
        self.method = method
        self.path = path
        self.status = status
        self.body = body


class MoodGardenApiClient:
    """
    Thin wrapper around TestClient that provides ergonomic helpers.

    Paths are relative to the ``/api`` prefix. Tests should stick to these
    helpers instead of hand crafting requests.
    """

    def __init__(self, client: TestClient) -> None:
        self._client = client

    # ------------------------------------------------------------------ #
    # Generic request helpers
    # ------------------------------------------------------------------ #
    def request(
        self,
        method: str,
        path: str,
        *,
        expected: Iterable[int] | None = None,
        absolute: bool = False,
        **kwargs: Any,
    ) -> httpx.Response:
        url = path if absolute else f"{API_PREFIX}{path}"
        response = self._client.request(method, url, **kwargs)
        if expected and response.status_code not in expected:
            raise MoodGardenApiError(method, path, response.status_code, response.text)
        return response

    # ------------------------------------------------------------------ #
    # Entry helpers
    # ------------------------------------------------------------------ #
    def create_entry(
        self,
        user_id: str,
        *,
        mood: Optional[str] = "happy",
        plant: Optional[str] = "🌻",
        journal: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if mood is not None:
            payload["mood"] = mood
        if plant is not None:
            payload["plant"] = plant
        if journal is not None:
            payload["journal"] = journal
        return self.request(
            "POST", f"/users/{user_id}/entries", json=payload, expected=(201,)
        ).json()

    def delete_entry(self, user_id: str, entry_id: str) -> Dict[str, Any]:
        return self.request(
            "DELETE", f"/users/{user_id}/entries/{entry_id}", expected=(200,)
        ).json()

    def get_garden(self, user_id: str, **params: Any) -> Dict[str, Any]:
        return self.request(
            "GET", f"/users/{user_id}/garden", params=params, expected=(200,)
        ).json()

    def get_history(self, user_id: str, **params: Any) -> Dict[str, Any]:
        return self.request(
            "GET", f"/users/{user_id}/history", params=params, expected=(200,)
        ).json()

    # ------------------------------------------------------------------ #
    # Analytics helpers
    # ------------------------------------------------------------------ #
    def get_streak(self, user_id: str) -> int:
        return self.request(
            "GET", f"/users/{user_id}/streak", expected=(200,)
        ).json()["streak"]

    def get_stats(self, user_id: str, **params: Any) -> Dict[str, Any]:
        return self.request(
            "GET", f"/users/{user_id}/stats", params=params, expected=(200,)
        ).json()

    def list_moods(self) -> list[Dict[str, Any]]:
        return self.request("GET", "/moods", expected=(200,)).json()
