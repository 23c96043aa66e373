"""shared fixtures: a fake circleci API behind httpx.MockTransport"""

from typing import Any

import httpx
import pytest

from circleci_client import CircleCI

BASE_URL = "https://circleci.com/api/v2"
SLUG = ("github", "org", "repo")
ENCODED_SLUG = "github%2Forg%2Frepo"

PROJECT = {
    "slug": "gh/org/repo",
    "organization_name": "org",
    "name": "repo",
    "vcs_info": {
        "vcs_url": "https://github.com/org/repo",
        "default_branch": "main",
        "provider": "GitHub",
    },
}

CHECKOUT_KEY = {
    "public-key": "ssh-rsa AAAA...",
    "type": "deploy-key",
    "fingerprint": "c9:0b:1c:4f",
    "preferred": True,
    "created-at": "2024-01-01T00:00:00Z",
}

ENV_VAR = {"name": "FOO", "value": "xxxx"}

WORKFLOW = {
    "pipeline_id": "p1",
    "id": "w1",
    "name": "build-and-test",
    "project_slug": "gh/org/repo",
    "status": "success",
    "started_by": "u1",
    "pipeline_number": 7,
    "created_at": "2024-01-01T00:00:00Z",
    "stopped_at": "2024-01-01T00:05:00Z",
}

JOB = {
    "dependencies": [],
    "job_number": 12,
    "id": "j1",
    "started_at": "2024-01-01T00:00:00Z",
    "name": "test",
    "project_slug": "gh/org/repo",
    "status": "success",
    "type": "build",
    "stopped_at": "2024-01-01T00:01:00Z",
}

PIPELINE = {
    "id": "p1",
    "errors": [],
    "project_slug": "gh/org/repo",
    "number": 7,
    "state": "created",
    "created_at": "2024-01-01T00:00:00Z",
    "trigger": {
        "type": "webhook",
        "received_at": "2024-01-01T00:00:00Z",
        "actor": {"login": "octocat", "avatar_url": "https://example.com/a.png"},
    },
    "vcs": {
        "provider_name": "GitHub",
        "origin_repository_url": "https://github.com/org/repo",
        "target_repository_url": "https://github.com/org/repo",
        "revision": "abc123",
        "branch": "main",
    },
}

PIPELINE_CONFIG = {"source": "version: 2.1", "compiled": "version: 2"}

PIPELINE_CREATION = {
    "id": "p2",
    "state": "pending",
    "number": 8,
    "created_at": "2024-01-02T00:00:00Z",
}

SUMMARY_METRICS = {
    "name": "build-and-test",
    "window_start": "2024-01-01T00:00:00Z",
    "window_end": "2024-01-31T00:00:00Z",
    "metrics": {
        "success_rate": 0.9,
        "total_runs": 10,
        "failed_runs": 1,
        "successful_runs": 9,
        "throughput": 0.3,
        "mttr": 120,
        "total_credits_used": 500,
        "duration_metrics": {
            "min": 60,
            "mean": 90,
            "median": 88,
            "p95": 150,
            "max": 160,
            "standard_deviation": 12.5,
        },
    },
}

WORKFLOW_RUN = {
    "id": "w1",
    "duration": 300,
    "created_at": "2024-01-01T00:00:00Z",
    "stopped_at": "2024-01-01T00:05:00Z",
    "credits_used": 50,
    "status": "success",
}

JOB_RUN = {
    "id": "j1",
    "started_at": "2024-01-01T00:00:00Z",
    "stopped_at": "2024-01-01T00:01:00Z",
    "status": "failed",
    "credits_used": 5,
}


def page(*items: dict[str, Any], next_page_token: str | None = None) -> dict[str, Any]:
    return {"items": list(items), "next_page_token": next_page_token}


class FakeCircleCI:
    """queue canned responses, record the requests that consume them"""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def respond(
        self,
        status_code: int,
        json: Any = None,
        content: bytes | None = None,
    ) -> None:
        if json is not None:
            self._responses.append(httpx.Response(status_code, json=json))
        else:
            self._responses.append(httpx.Response(status_code, content=content or b""))

    def fail(self, error: Exception) -> None:
        self._responses.append(error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def client(self, project_slug: Any = SLUG) -> CircleCI:
        return CircleCI(
            "test-token",
            project_slug,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self.handler)),
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def url_without_query(request: httpx.Request) -> str:
    return str(request.url).split("?", 1)[0]


@pytest.fixture
def fake_api() -> FakeCircleCI:
    return FakeCircleCI()
