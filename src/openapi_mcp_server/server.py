"""
MCP server exposing compiled OpenAPI operations as tools.
"""

import logging
from typing import List, Optional

import httpx
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .compiler import OpenAPIToolCompiler
from .config import ServerConfig
from .dispatcher import ToolDispatcher
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


class OpenAPIMCPServer:
    """Serves the tools of one OpenAPI document over MCP."""

    def __init__(self, config: ServerConfig, client: Optional[httpx.AsyncClient] = None):
        self.config = config
        self.server = Server(config.name, version=config.version)
        self._client = client
        self.dispatcher: Optional[ToolDispatcher] = None

        self._register_handlers()

    @property
    def registry(self) -> ToolRegistry:
        if self.dispatcher is None:
            raise RuntimeError("Server has not been initialized")
        return self.dispatcher.registry

    def initialize(self) -> ToolRegistry:
        """Load and compile the OpenAPI document.

        Must run exactly once, before the server starts serving.

        Raises:
            SpecLoadError: If the document cannot be fetched or parsed
        """
        if self.dispatcher is not None:
            raise RuntimeError("Server is already initialized")

        registry = OpenAPIToolCompiler.from_source(self.config.openapi_spec).compile()
        logger.info("Compiled %d tools from %s", len(registry), self.config.openapi_spec)
        self.dispatcher = ToolDispatcher(
            registry,
            self.config.api_base_url,
            headers=self.config.headers,
            client=self._client,
        )
        return registry

    def _register_handlers(self) -> None:
        @self.server.list_tools()
        async def list_tools() -> List[types.Tool]:
            return [
                types.Tool(
                    name=tool.name,
                    description=tool.description,
                    inputSchema=tool.input_schema.to_json_schema(),
                )
                for tool in self.registry.values()
            ]

        async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
            """Dispatch by the ``id`` extra when the client sends one, else by name."""
            if self.dispatcher is None:
                raise RuntimeError("Server has not been initialized")

            params = request.params
            tool_id = (params.model_extra or {}).get("id")
            try:
                result = await self.dispatcher.dispatch(
                    tool_id=tool_id, name=params.name, arguments=params.arguments or {}
                )
            except Exception as e:
                logger.error("Tool call failed: %s", e)
                return types.ServerResult(
                    types.CallToolResult(
                        content=[types.TextContent(type="text", text=str(e))],
                        isError=True,
                    )
                )

            return types.ServerResult(
                types.CallToolResult(
                    content=[types.TextContent(type="text", text=block.text) for block in result.content],
                    isError=False,
                )
            )

        self.server.request_handlers[types.CallToolRequest] = call_tool

    async def run_stdio(self) -> None:
        """Serve requests on stdin/stdout until the client disconnects."""
        if self.dispatcher is None:
            raise RuntimeError("Server has not been initialized")

        async with stdio_server() as (read_stream, write_stream):
            logger.info("OpenAPI MCP Server running on stdio")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
