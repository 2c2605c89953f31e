"""Shared fixtures for compiler and dispatcher tests."""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from openapi_mcp_server.compiler import OpenAPIToolCompiler
from openapi_mcp_server.dispatcher import ToolDispatcher

BASE_URL = "https://api.example.com"


@pytest.fixture
def voices_spec() -> Dict[str, Any]:
    """A small ElevenLabs-like spec with GET and POST operations."""
    return {
        "openapi": "3.0.0",
        "info": {"title": "Voices API", "version": "1.0.0"},
        "paths": {
            "/voices": {
                "get": {
                    "summary": "List voices",
                    "description": "Returns every voice available to the user",
                    "parameters": [
                        {
                            "name": "tags",
                            "in": "query",
                            "schema": {"type": "array", "items": {"type": "string"}},
                        },
                        {
                            "name": "page_size",
                            "in": "query",
                            "description": "How many voices to return",
                            "schema": {"type": "integer"},
                        },
                    ],
                },
                "post": {
                    "summary": "Add voice",
                },
            },
            "/voices/{voice_id}": {
                "parameters": [{"name": "voice_id", "in": "path", "required": True}],
                "get": {
                    "parameters": [
                        {
                            "name": "voice_id",
                            "in": "path",
                            "required": True,
                            "schema": {"type": "string"},
                        }
                    ]
                },
                "delete": {},
            },
        },
    }


@pytest.fixture
def registry(voices_spec):
    return OpenAPIToolCompiler(voices_spec).compile()


class RecordingTransport:
    """Collects outgoing requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, payload: Any = None):
        self.status_code = status_code
        self.payload = {"ok": True} if payload is None else payload
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_dispatcher(registry) -> Callable[..., ToolDispatcher]:
    """Build a dispatcher whose HTTP calls go to a mock transport."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> ToolDispatcher:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ToolDispatcher(
            kwargs.pop("registry", registry),
            kwargs.pop("api_base_url", BASE_URL),
            headers=kwargs.pop("headers", {"xi-api-key": "secret", "Content-Type": "application/json"}),
            client=client,
        )

    return _make


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)
