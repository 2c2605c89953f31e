"""Tests for loading OpenAPI documents."""

import json

import httpx
import pytest

from openapi_mcp_server import loader
from openapi_mcp_server.exceptions import SpecLoadError

SPEC = {"openapi": "3.0.0", "paths": {"/voices": {"get": {"summary": "List voices"}}}}


def test_parse_json():
    assert loader.parse_spec(json.dumps(SPEC)) == SPEC


def test_parse_yaml():
    yaml_str = """
    openapi: 3.0.0
    paths:
      /voices:
        get:
          summary: List voices
    """
    assert loader.parse_spec(yaml_str) == SPEC


def test_parse_invalid_text():
    with pytest.raises(SpecLoadError):
        loader.parse_spec("paths: [unclosed")


def test_parse_non_mapping():
    with pytest.raises(SpecLoadError):
        loader.parse_spec("just a string")


def test_load_local_file(tmp_path):
    spec_file = tmp_path / "openapi.json"
    spec_file.write_text(json.dumps(SPEC), encoding="utf-8")
    assert loader.load_spec(str(spec_file)) == SPEC


def test_load_missing_file(tmp_path):
    with pytest.raises(SpecLoadError, match="Failed to load OpenAPI spec"):
        loader.load_spec(str(tmp_path / "missing.json"))


def test_load_parsed_document_unchanged():
    assert loader.load_spec(SPEC) is SPEC


def test_load_from_url(monkeypatch):
    calls = []

    def fake_get(url, **kwargs):
        calls.append(url)
        return httpx.Response(200, text=json.dumps(SPEC), request=httpx.Request("GET", url))

    monkeypatch.setattr(loader.httpx, "get", fake_get)
    assert loader.load_spec("https://api.example.com/openapi.json") == SPEC
    assert calls == ["https://api.example.com/openapi.json"]


def test_load_from_url_error_status(monkeypatch):
    def fake_get(url, **kwargs):
        return httpx.Response(404, text="not found", request=httpx.Request("GET", url))

    monkeypatch.setattr(loader.httpx, "get", fake_get)
    with pytest.raises(SpecLoadError, match="404"):
        loader.load_spec("https://api.example.com/openapi.json")


def test_load_from_url_connection_error(monkeypatch):
    def fake_get(url, **kwargs):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr(loader.httpx, "get", fake_get)
    with pytest.raises(SpecLoadError, match="connection refused"):
        loader.load_spec("http://localhost:1/openapi.json")


def test_load_file_with_invalid_utf8(tmp_path):
    spec_file = tmp_path / "openapi.json"
    spec_file.write_bytes(b'{"paths": {"/\xff": {}}}')
    with pytest.raises(SpecLoadError, match="Failed to load OpenAPI spec"):
        loader.load_spec(str(spec_file))
