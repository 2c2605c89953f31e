"""
Server configuration.
"""

import logging
import os
from typing import Dict, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "elevenlabs-mcp-server"
DEFAULT_SERVER_VERSION = "1.0.1"
DEFAULT_API_BASE_URL = "https://api.elevenlabs.io"
DEFAULT_OPENAPI_SPEC = "https://api.elevenlabs.io/openapi.json"

API_KEY_ENV = "ELEVENLABS_API_KEY"
API_KEY_HEADER = "xi-api-key"


class ServerConfig(BaseModel):
    """Settings consumed once at startup."""

    name: str = DEFAULT_SERVER_NAME
    version: str = DEFAULT_SERVER_VERSION
    api_base_url: str = DEFAULT_API_BASE_URL
    openapi_spec: str = DEFAULT_OPENAPI_SPEC
    headers: Dict[str, str] = Field(default_factory=dict)


def load_config(
    server_version: Optional[str] = None,
    api_base_url: Optional[str] = None,
    openapi_spec: Optional[str] = None,
    name: Optional[str] = None,
) -> ServerConfig:
    """Build the server configuration.

    Explicit arguments win over environment variables, which win over the
    defaults. The API key is only ever read from the environment.

    Args:
        server_version: Version reported to clients (``SERVER_VERSION``)
        api_base_url: Base URL for outbound calls (``API_BASE_URL``)
        openapi_spec: URL or path of the OpenAPI document (``OPENAPI_SPEC``)
        name: Server display name (``SERVER_NAME``)

    Returns:
        The resolved configuration
    """
    headers: Dict[str, str] = {}
    api_key = os.environ.get(API_KEY_ENV)
    if api_key:
        headers[API_KEY_HEADER] = api_key
    else:
        logger.warning(
            "%s environment variable not set. API calls will likely fail.", API_KEY_ENV
        )
    headers["Content-Type"] = "application/json"

    return ServerConfig(
        name=name or os.environ.get("SERVER_NAME") or DEFAULT_SERVER_NAME,
        version=server_version or os.environ.get("SERVER_VERSION") or DEFAULT_SERVER_VERSION,
        api_base_url=api_base_url or os.environ.get("API_BASE_URL") or DEFAULT_API_BASE_URL,
        openapi_spec=openapi_spec or os.environ.get("OPENAPI_SPEC") or DEFAULT_OPENAPI_SPEC,
        headers=headers,
    )
