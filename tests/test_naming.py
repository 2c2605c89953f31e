"""Tests for the naming module."""

import re

import pytest

from openapi_mcp_server.naming import (
    MAX_TOOL_NAME_LENGTH,
    build_tool_id,
    build_tool_name,
    parse_tool_id,
    sanitize_tool_name,
)


class TestBuildToolId:
    """Test identifier generation from HTTP method + path."""

    def test_simple_path(self):
        assert build_tool_id("get", "/voices") == "GET-voices"

    def test_path_parameter(self):
        assert build_tool_id("get", "/voices/{voice_id}") == "GET-voices--voice-id-"

    def test_nested_path(self):
        assert build_tool_id("post", "/v1/text-to-speech/{voice_id}/stream") == (
            "POST-v1-text-to-speech--voice-id--stream"
        )

    def test_only_identifier_characters(self):
        tool_id = build_tool_id("patch", "/a.b/c d/{e}?f=1")
        assert re.fullmatch(r"[A-Za-z0-9-]+", tool_id)

    def test_only_first_slash_stripped(self):
        assert build_tool_id("get", "//double") == "GET--double"


class TestParseToolId:
    """Test recovering method + path from an identifier."""

    def test_simple(self):
        assert parse_tool_id("GET-voices") == ("GET", "/voices")

    def test_path_parameter(self):
        assert parse_tool_id("GET-voices--voice-id-") == ("GET", "/voices//voice/id/")

    def test_method_only(self):
        assert parse_tool_id("GET") == ("GET", "/")

    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/voices"),
            ("get", "/voices/{voice_id}"),
            ("post", "/v1/history/{history_item_id}/audio"),
            ("delete", "/v1/models"),
        ],
    )
    def test_round_trip_without_hyphens(self, method, path):
        """Re-deriving the identifier from the recovered path is idempotent."""
        tool_id = build_tool_id(method, path)
        recovered_method, recovered_path = parse_tool_id(tool_id)
        assert build_tool_id(recovered_method, recovered_path) == tool_id

    def test_hyphenated_path_is_not_recovered(self):
        """Literal hyphens in a path become slashes (known limitation)."""
        tool_id = build_tool_id("post", "/v1/text-to-speech")
        method, path = parse_tool_id(tool_id)
        assert method == "POST"
        assert path == "/v1/text/to/speech"
        assert path != "/v1/text-to-speech"

    def test_hyphenated_path_collides_with_slashed_path(self):
        assert build_tool_id("get", "/user-info") == build_tool_id("get", "/user/info")


class TestBuildToolName:
    """Test human-facing tool names."""

    def test_prefers_summary(self):
        assert build_tool_name("get", "/voices", "List voices") == "List_voices"

    def test_synthesized_from_path(self):
        assert build_tool_name("get", "/voices/{voice_id}") == "GET_voices_voice_id_"

    def test_empty_summary_falls_back(self):
        assert build_tool_name("delete", "/models", "") == "DELETE_models"

    def test_underscores_collapsed(self):
        assert sanitize_tool_name("Get   the (voice)") == "Get_the_voice_"

    def test_hyphens_kept(self):
        assert sanitize_tool_name("text-to-speech") == "text-to-speech"

    def test_long_summary_truncated(self):
        name = build_tool_name("get", "/x", "Convert text into speech " * 10)
        assert len(name) == MAX_TOOL_NAME_LENGTH

    @pytest.mark.parametrize(
        "summary,path",
        [
            ("Héllo wörld! ünïcode summary", "/a"),
            (None, "/very/long/" + "segment/" * 20 + "{id}"),
            ("", "/{a}/{b}/{c}"),
            ("Ends with a very long tail" + "." * 100, "/x"),
        ],
    )
    def test_names_are_valid(self, summary, path):
        name = build_tool_name("get", path, summary)
        assert len(name) <= MAX_TOOL_NAME_LENGTH
        assert re.fullmatch(r"[A-Za-z0-9_-]+", name)
        assert "__" not in name
