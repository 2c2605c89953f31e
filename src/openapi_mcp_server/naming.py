"""Convert HTTP method + path to tool identifiers and tool names.

Identifier pattern: {METHOD}-{path}, with every character outside
[A-Za-z0-9-] replaced by "-".

Examples:
  GET  /voices                -> GET-voices
  GET  /voices/{voice_id}     -> GET-voices--voice-id-
  POST /v1/text-to-speech     -> POST-v1-text-to-speech

Identifiers are decoded back into (method, path) by splitting on the first
hyphen and turning every remaining hyphen into a slash. Hyphens that were
part of the original path are therefore lost:

  POST-v1-text-to-speech     -> POST /v1/text/to/speech

Underscores are sanitized to hyphens as well, so a {voice_id} placeholder
comes back as /voice/id/.

Tool names prefer the operation summary and fall back to METHOD_path. They
are limited to [A-Za-z0-9_-] and 64 characters and are not unique.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

MAX_TOOL_NAME_LENGTH = 64

_IDENTIFIER_INVALID = re.compile(r"[^a-zA-Z0-9-]")
_NAME_INVALID = re.compile(r"[^a-zA-Z0-9_-]")
_REPEATED_UNDERSCORES = re.compile(r"_{2,}")


def _clean_path(path: str) -> str:
    """Strip a single leading slash."""
    return path[1:] if path.startswith("/") else path


def build_tool_id(method: str, path: str) -> str:
    """Build the registry key for an operation."""
    return _IDENTIFIER_INVALID.sub("-", f"{method.upper()}-{_clean_path(path)}")


def sanitize_tool_name(name: str) -> str:
    """Restrict a name to [A-Za-z0-9_-], collapse underscores, truncate."""
    name = _NAME_INVALID.sub("_", name)
    name = _REPEATED_UNDERSCORES.sub("_", name)
    return name[:MAX_TOOL_NAME_LENGTH]


def build_tool_name(method: str, path: str, summary: Optional[str] = None) -> str:
    """Build the human-facing tool name from the summary or method + path."""
    name = summary or ""
    if not name:
        name = f"{method.upper()}_{'_'.join(_clean_path(path).split('/'))}"
    return sanitize_tool_name(name)


def parse_tool_id(tool_id: str) -> Tuple[str, str]:
    """Recover ``(METHOD, /path)`` from a tool identifier.

    Best effort only: see the module docstring for the hyphen ambiguity.
    """
    method, _, rest = tool_id.partition("-")
    return method, "/" + rest.replace("-", "/")
