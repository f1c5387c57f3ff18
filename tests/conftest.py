from __future__ import annotations

from typing import Any, List, Optional, Tuple

import pytest
import requests

from showcase_updater.models import Repository
from showcase_updater.services.action_service import ActionReporter


class RecordingReporter(ActionReporter):
    """Reporter that keeps every message instead of printing it."""

    def __init__(self) -> None:
        super().__init__(environ={})
        self.infos: List[str] = []
        self.warnings: List[str] = []
        self.errors: List[str] = []
        self.outputs: dict = {}

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def set_output(self, name: str, value) -> None:
        self.outputs[name] = value


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None) -> None:
        self.status_code = status_code
        self._payload = payload

    def json(self) -> Any:
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeRequests:
    """Queues canned responses for requests.get / requests.put."""

    def __init__(self) -> None:
        self.get_responses: List[Any] = []
        self.put_responses: List[Any] = []
        self.calls: List[Tuple[str, str, dict]] = []

    def _next(self, queue: List[Any]) -> FakeResponse:
        response = queue.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append(("GET", url, kwargs))
        return self._next(self.get_responses)

    def put(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append(("PUT", url, kwargs))
        return self._next(self.put_responses)


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def fake_requests(monkeypatch: pytest.MonkeyPatch) -> FakeRequests:
    """Route the GitHub service's HTTP calls to canned responses."""
    fake = FakeRequests()
    monkeypatch.setattr(requests, "get", fake.get)
    monkeypatch.setattr(requests, "put", fake.put)
    return fake


@pytest.fixture
def response_factory():
    def build(status_code: int = 200, payload: Optional[Any] = None) -> FakeResponse:
        return FakeResponse(status_code, payload)

    return build


@pytest.fixture
def sample_repositories() -> List[Repository]:
    return [
        Repository(
            name="awesome-project",
            full_name="user/awesome-project",
            description="An awesome project that does amazing things",
            html_url="https://github.com/user/awesome-project",
            language="TypeScript",
            stargazers_count=42,
            forks_count=5,
            topics=("showcase", "typescript", "project"),
            updated_at="2023-01-01T00:00:00Z",
        ),
        Repository(
            name="cool-app",
            full_name="user/cool-app",
            description="A very cool application",
            html_url="https://github.com/user/cool-app",
            language="JavaScript",
            stargazers_count=123,
            forks_count=8,
            topics=("showcase", "javascript"),
            homepage="https://cool-app.example.com",
            updated_at="2023-01-02T00:00:00Z",
        ),
    ]
