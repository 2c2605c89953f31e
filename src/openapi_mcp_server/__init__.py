"""Expose an OpenAPI specification as MCP tools."""

from .compiler import OpenAPIToolCompiler
from .config import ServerConfig, load_config
from .dispatcher import ToolDispatcher
from .exceptions import (
    OpenAPIMCPError,
    SpecLoadError,
    ToolNotFoundError,
    UpstreamRequestError,
)
from .models import PropertySchema, ToolCallResult, ToolDescriptor, ToolInputSchema
from .registry import ToolRegistry

__version__ = "1.0.1"
__all__ = [
    "OpenAPIToolCompiler",
    "ToolDispatcher",
    "ToolRegistry",
    "ServerConfig",
    "load_config",
    "PropertySchema",
    "ToolInputSchema",
    "ToolDescriptor",
    "ToolCallResult",
    "OpenAPIMCPError",
    "SpecLoadError",
    "ToolNotFoundError",
    "UpstreamRequestError",
]
