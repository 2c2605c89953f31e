"""
Exceptions raised while compiling an OpenAPI document and dispatching tools.
"""

import json
from typing import Any, List, Optional, Tuple


class OpenAPIMCPError(Exception):
    """Base exception for OpenAPI MCP server errors."""
    pass


class SpecLoadError(OpenAPIMCPError):
    """Raised when the OpenAPI document cannot be fetched or parsed."""
    pass


class ToolNotFoundError(OpenAPIMCPError):
    """Raised when no registered tool matches the requested id or name."""

    def __init__(self, tool: Optional[str], available: List[Tuple[str, str]]):
        self.tool = tool
        self.available = available
        super().__init__(
            f"Tool not found: {tool}. Available tools: {self.describe_available() or '(none)'}"
        )

    def describe_available(self) -> str:
        """Render the registered tools as ``id (name)`` pairs."""
        return ", ".join(f"{tool_id} ({name})" for tool_id, name in self.available)


class UpstreamRequestError(OpenAPIMCPError):
    """Raised when the upstream API call fails at the HTTP level."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.body = body
        detail = f"API request failed: {message}"
        if body is not None:
            detail += f" - {json.dumps(body, default=str)}"
        super().__init__(detail)
