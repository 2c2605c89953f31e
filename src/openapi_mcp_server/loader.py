"""
Loading of OpenAPI documents from a URL or the local filesystem.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import httpx
import yaml

from .exceptions import SpecLoadError

logger = logging.getLogger(__name__)


def parse_spec(content: str) -> Dict[str, Any]:
    """Parse an OpenAPI document from JSON or YAML text.

    Args:
        content: The raw document text

    Returns:
        The parsed document

    Raises:
        SpecLoadError: If the text is neither JSON nor YAML, or is not a mapping
    """
    try:
        # Try JSON first
        spec = json.loads(content)
    except json.JSONDecodeError:
        try:
            # Try YAML if JSON fails
            spec = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SpecLoadError(f"Failed to parse OpenAPI spec: {e}")

    if not isinstance(spec, dict):
        raise SpecLoadError("OpenAPI spec must be a mapping")
    return spec


def _fetch_url(url: str) -> str:
    try:
        response = httpx.get(url, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise SpecLoadError(f"Failed to load OpenAPI spec from {url}: {e}")
    return response.text


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SpecLoadError(f"Failed to load OpenAPI spec from {path}: {e}")


def load_spec(source: Union[str, Path, Dict[str, Any]]) -> Dict[str, Any]:
    """Load an OpenAPI document.

    Strings starting with ``http`` are fetched with a GET request; anything
    else is read as a UTF-8 file. An already-parsed document is returned as is.

    Args:
        source: URL, file path, or parsed document

    Returns:
        The parsed OpenAPI document

    Raises:
        SpecLoadError: If the document cannot be fetched or parsed
    """
    if isinstance(source, dict):
        return source

    if isinstance(source, str) and source.startswith("http"):
        logger.info("Fetching OpenAPI spec from %s", source)
        content = _fetch_url(source)
    else:
        logger.info("Reading OpenAPI spec from %s", source)
        content = _read_file(Path(source))

    return parse_spec(content)
