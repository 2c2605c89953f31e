"""
Dispatch tool invocations to the HTTP endpoints they were compiled from.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

from .exceptions import ToolNotFoundError, UpstreamRequestError
from .models import TextContent, ToolCallResult, ToolDescriptor
from .naming import parse_tool_id
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


def _stringify(value: Any) -> str:
    """Render an argument the way it appears in a query string.

    Lists, nested ones included, are flattened and joined with commas.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def build_query_params(arguments: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Flatten arguments into query parameters.

    Lists are joined with commas and ``None`` values are dropped.
    """
    params: Dict[str, str] = {}
    for key, value in (arguments or {}).items():
        if value is not None:
            params[key] = _stringify(value)
    return params


def _response_payload(response: httpx.Response) -> Any:
    """Decode a JSON response body, falling back to its text."""
    try:
        return response.json()
    except ValueError:
        return response.text


class ToolDispatcher:
    """Routes tool calls from the registry to the upstream API."""

    def __init__(
        self,
        registry: ToolRegistry,
        api_base_url: str,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the dispatcher.

        Args:
            registry: Compiled tools, treated as read-only
            api_base_url: Base URL every tool path is joined onto
            headers: Static headers sent with every request
            client: HTTP client to use. A short-lived client is opened per
                call when not provided.
        """
        self.registry = registry
        self.api_base_url = api_base_url
        self.headers = dict(headers or {})
        self._client = client

    @property
    def base_url(self) -> str:
        """The base URL with exactly one trailing slash."""
        return self.api_base_url.rstrip("/") + "/"

    def resolve(
        self, tool_id: Optional[str] = None, name: Optional[str] = None
    ) -> Tuple[str, ToolDescriptor]:
        """Find a tool by identifier, or by name when no identifier is given.

        Raises:
            ToolNotFoundError: If nothing matches
        """
        if tool_id:
            tool_id = str(tool_id).strip()
            tool = self.registry.get(tool_id)
            if tool is not None:
                return tool_id, tool
        elif name:
            match = self.registry.find_by_name(name)
            if match is not None:
                return match

        error = ToolNotFoundError(tool_id or name, self.registry.summary())
        logger.error("Available tools: %s", error.describe_available())
        raise error

    def build_url(self, path: str) -> str:
        return self.base_url + path.lstrip("/")

    def build_request(
        self, tool_id: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """Reconstruct the HTTP request for a tool call.

        GET arguments become query parameters; every other method sends the
        arguments unchanged as the JSON body.

        Returns:
            Keyword arguments for ``httpx.AsyncClient.request``
        """
        method, path = parse_tool_id(tool_id)
        request: Dict[str, Any] = {
            "method": method.upper(),
            "url": self.build_url(path),
            "headers": self.headers,
        }
        if method.lower() == "get":
            if isinstance(arguments, Mapping):
                request["params"] = build_query_params(arguments)
        elif arguments is not None:
            request["json"] = arguments
        return request

    async def _send(self, request: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(**request)
        async with httpx.AsyncClient(timeout=None, follow_redirects=True) as client:
            return await client.request(**request)

    async def dispatch(
        self,
        tool_id: Optional[str] = None,
        name: Optional[str] = None,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> ToolCallResult:
        """Invoke a tool and return its response as a text content block.

        Args:
            tool_id: Tool identifier, takes precedence over ``name``
            name: Tool name, first match in registry order
            arguments: Argument values for the call

        Returns:
            A single text block holding the pretty-printed JSON response

        Raises:
            ToolNotFoundError: If the tool cannot be resolved
            UpstreamRequestError: If the API responds with an error status or
                the request cannot be sent
        """
        logger.debug("Received call: id=%s name=%s arguments=%s", tool_id, name, arguments)
        tool_id, tool = self.resolve(tool_id, name)
        logger.info("Executing tool: %s (%s)", tool_id, tool.name)

        request = self.build_request(tool_id, arguments)
        logger.debug(
            "Request: %s %s params=%s body=%s",
            request["method"],
            request["url"],
            request.get("params"),
            request.get("json"),
        )

        try:
            response = await self._send(request)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = _response_payload(e.response)
            logger.error(
                "Request failed: status=%s reason=%s body=%s",
                e.response.status_code,
                e.response.reason_phrase,
                body,
            )
            raise UpstreamRequestError(str(e), status_code=e.response.status_code, body=body) from e
        except httpx.RequestError as e:
            logger.error("Request failed: %s", e)
            raise UpstreamRequestError(str(e)) from e

        data = _response_payload(response)
        logger.debug("Response status: %s", response.status_code)
        logger.debug("Response data: %s", data)
        return ToolCallResult(
            content=[TextContent(text=json.dumps(data, indent=2, ensure_ascii=False))]
        )
