"""
Compile OpenAPI operations into tool descriptors.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

from .exceptions import SpecLoadError
from .loader import load_spec
from .models import PropertySchema, ToolDescriptor, ToolInputSchema
from .naming import build_tool_id, build_tool_name
from .registry import ToolRegistry

logger = logging.getLogger(__name__)


class OpenAPIToolCompiler:
    """Compiles an OpenAPI document into a tool registry."""

    def __init__(self, openapi_spec: Dict[str, Any]):
        """Initialize the compiler with an OpenAPI document.

        Args:
            openapi_spec: Dictionary containing the OpenAPI document
        """
        self.spec = openapi_spec

    @classmethod
    def from_source(cls, source: Union[str, Path]) -> "OpenAPIToolCompiler":
        """Create a compiler from a spec URL or file path.

        Args:
            source: URL (starting with ``http``) or path to the OpenAPI document

        Returns:
            An instance of OpenAPIToolCompiler

        Raises:
            SpecLoadError: If the document cannot be fetched or parsed
        """
        return cls(load_spec(source))

    def _build_input_schema(self, operation: Dict[str, Any]) -> ToolInputSchema:
        """Build the input contract from the operation's declared parameters.

        Args:
            operation: OpenAPI operation object

        Returns:
            The tool's input schema
        """
        input_schema = ToolInputSchema()
        for param in operation.get("parameters") or []:
            if not isinstance(param, dict) or "name" not in param or "in" not in param:
                continue

            param_schema = param.get("schema") or {}
            input_schema.add_property(
                param["name"],
                PropertySchema(
                    type=param_schema.get("type") or "string",
                    description=param.get("description") or f"{param['name']} parameter",
                ),
                required=bool(param.get("required")),
            )
        return input_schema

    def compile_operation(self, path: str, method: str, operation: Dict[str, Any]) -> ToolDescriptor:
        """Compile a single operation into a tool descriptor.

        Args:
            path: API endpoint path
            method: HTTP method
            operation: OpenAPI operation object

        Returns:
            The tool descriptor
        """
        return ToolDescriptor(
            name=build_tool_name(method, path, operation.get("summary")),
            description=(
                operation.get("description")
                or f"Make a {method.upper()} request to {path}"
            ),
            input_schema=self._build_input_schema(operation),
        )

    def compile(self) -> ToolRegistry:
        """Compile every operation in the document.

        Operations whose identifiers collide overwrite earlier ones.

        Returns:
            The populated tool registry

        Raises:
            SpecLoadError: If the document has no ``paths`` mapping
        """
        paths = self.spec.get("paths")
        if not isinstance(paths, dict):
            raise SpecLoadError("OpenAPI spec has no 'paths' mapping")

        tools: Dict[str, ToolDescriptor] = {}
        for path, path_item in paths.items():
            if not isinstance(path_item, dict):
                continue

            for method, operation in path_item.items():
                if method == "parameters" or not isinstance(operation, dict):
                    continue

                tool_id = build_tool_id(method, path)
                tool = self.compile_operation(path, method, operation)
                logger.info("Registering tool: %s (%s)", tool_id, tool.name)
                tools[tool_id] = tool

        return ToolRegistry(tools)
