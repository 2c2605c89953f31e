"""
Data models for tools compiled from an OpenAPI specification.
"""

from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class PropertySchema(BaseModel):
    """A single argument in a tool's input contract."""

    type: Union[str, List[str]] = "string"
    description: str


class ToolInputSchema(BaseModel):
    """Object-shaped JSON schema describing a tool's arguments."""

    type: Literal["object"] = "object"
    properties: Dict[str, PropertySchema] = Field(default_factory=dict)
    required: Optional[List[str]] = None

    def add_property(self, name: str, schema: PropertySchema, required: bool = False) -> None:
        self.properties[name] = schema
        if required:
            if self.required is None:
                self.required = []
            self.required.append(name)

    def to_json_schema(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ToolDescriptor(BaseModel):
    """Represents a callable tool derived from one OpenAPI operation."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    input_schema: ToolInputSchema = Field(
        default_factory=ToolInputSchema, alias="inputSchema"
    )

    def to_listing(self) -> Dict[str, Any]:
        """Return the externally visible ``{name, description, inputSchema}`` triple."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema.to_json_schema(),
        }


class TextContent(BaseModel):
    """A text content block returned from a tool call."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResult(BaseModel):
    """Result of a successful tool invocation."""

    content: List[TextContent] = Field(default_factory=list)
