"""Shared fixtures for client-roster tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from core.domain.errors import TransportError


class StubSource:
    """In-memory `ClientSource` returning canned bodies or raising canned errors."""

    def __init__(self, *results: str | Exception) -> None:
        self._results = list(results)
        self.calls = 0

    async def fetch_clients(self) -> str:
        self.calls += 1
        result = self._results.pop(0) if len(self._results) > 1 else self._results[0]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    return {
        "clients": [
            {"id": 1, "label": "Alice", "isManager": True},
            {"id": 2, "label": "Bob", "isManager": False},
        ],
        "data": {
            "1": {"name": "Alice A.", "address": "1 Rd", "points": 50},
        },
        "label": "Client list",
    }


@pytest.fixture
def sample_body(sample_payload: dict[str, Any]) -> str:
    return json.dumps(sample_payload)


@pytest.fixture
def mixed_body() -> str:
    return json.dumps(
        {
            "clients": [
                {"id": 10, "label": "Manager A", "isManager": True},
                {"id": 11, "label": "Worker B", "isManager": False},
                {"id": 12, "label": "Manager C", "isManager": True},
                {"id": 13, "label": "Worker D", "isManager": False},
            ],
            "data": {
                "10": {"name": "Ann", "address": "10 Main St", "points": 120},
                "11": {"name": "Ben", "address": "11 Main St", "points": 7},
                "12": {"name": "Cid", "address": "12 Main St", "points": 64},
                "99": {"name": "Orphan", "address": "Nowhere", "points": 1},
            },
            "label": "Mixed",
        }
    )


@pytest.fixture
def transport_failure() -> TransportError:
    return TransportError("HTTP 503 Service Unavailable", status_code=503)


@pytest.fixture
def stub_source() -> type[StubSource]:
    return StubSource
