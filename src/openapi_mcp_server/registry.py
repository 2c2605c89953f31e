"""
Read-only registry of compiled tools, keyed by tool identifier.
"""

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from .models import ToolDescriptor


class ToolRegistry(Mapping[str, ToolDescriptor]):
    """Tool identifier -> descriptor, in document order.

    The registry is populated once by the compiler and never mutated
    afterwards; it only exposes the read side of a mapping.
    """

    def __init__(self, tools: Optional[Dict[str, ToolDescriptor]] = None):
        self._tools = MappingProxyType(dict(tools or {}))

    def __getitem__(self, tool_id: str) -> ToolDescriptor:
        return self._tools[tool_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)

    def find_by_name(self, name: str) -> Optional[Tuple[str, ToolDescriptor]]:
        """Return the first ``(tool_id, descriptor)`` whose name matches.

        Names are not unique; iteration order decides which tool wins.
        """
        for tool_id, tool in self._tools.items():
            if tool.name == name:
                return tool_id, tool
        return None

    def summary(self) -> List[Tuple[str, str]]:
        """List every registered ``(tool_id, name)`` pair."""
        return [(tool_id, tool.name) for tool_id, tool in self._tools.items()]

    def listing(self) -> List[Dict]:
        """Return the external tool listing (identifiers are not included)."""
        return [tool.to_listing() for tool in self._tools.values()]
