"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from infra import InfraBootstrap  # noqa: E402


class RecordingUpstream:
    """
    Fake Groq endpoint for httpx.MockTransport.

    Records every request and answers with the configured status/body,
    or raises the configured exception.
    """

    def __init__(self, status_code=200, body=None, text=None, exc=None):
        self.status_code = status_code
        self.body = body
        self.text = text
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc(f"simulated {self.exc.__name__}", request=request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_json(self):
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def completion_body(content="Hello from the model"):
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def make_upstream():
    return RecordingUpstream


@pytest.fixture
def make_completion():
    return completion_body


@pytest.fixture(autouse=True)
def reset_bootstrap():
    """Each test builds its own backend singleton."""
    InfraBootstrap.reset()
    yield
    InfraBootstrap.reset()
