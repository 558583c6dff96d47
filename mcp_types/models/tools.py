"""
Tool definitions, tool calls and the content a tool call returns.
"""

from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import Field

from mcp_types.models.base import WireModel
from mcp_types.models.pagination import PaginatedRequest, PaginatedResult


class TextContent(WireModel):
    """Plain text returned by a tool."""

    type: Literal["text"] = "text"
    text: str

    @classmethod
    def of(cls, text: str) -> "TextContent":
        return cls(text=text)


class ImageContent(WireModel):
    """Base64 encoded image returned by a tool."""

    type: Literal["image"] = "image"
    data: str
    mime_type: str

    @classmethod
    def of(cls, data: str, mime_type: str) -> "ImageContent":
        return cls(data=data, mime_type=mime_type)


class ResourceReference(WireModel):
    """Reference to a server resource by URI."""

    type: Literal["resource"] = "resource"
    resource: str

    @classmethod
    def of(cls, uri: str) -> "ResourceReference":
        return cls(resource=uri)


ToolResultContent = Annotated[
    Union[TextContent, ImageContent, ResourceReference],
    Field(discriminator="type"),
]


class ToolInputSchema(WireModel):
    """
    JSON Schema describing a tool's arguments.

    Keywords other than ``type``, ``properties`` and ``required`` are kept
    as extra fields and written back at the same level, not under a sub-key.
    """

    type: str
    properties: Optional[Dict[str, Any]] = None
    required: Optional[List[str]] = None

    model_config = {"extra": "allow"}

    @property
    def additional(self) -> Dict[str, Any]:
        """Schema keywords beyond the named fields."""
        return dict(self.model_extra or {})


class Tool(WireModel):
    """A tool exposed by a server. ``name`` is unique within that server."""

    name: str
    description: Optional[str] = None
    input_schema: ToolInputSchema

    @classmethod
    def new(cls, name: str, description: str) -> "Tool":
        return cls(
            name=name,
            description=description,
            input_schema=ToolInputSchema(type="object"),
        )

    def with_parameter(self, name: str, description: str, required: bool = False) -> "Tool":
        """
        Return a copy of this tool with a string parameter added to its schema.

        ``properties`` and ``required`` are created on first use.
        """
        schema = self.input_schema
        properties = dict(schema.properties or {})
        properties[name] = {"type": "string", "description": description}
        update: Dict[str, Any] = {"properties": properties}
        if required:
            update["required"] = list(schema.required or []) + [name]

        return self.model_copy(update={"input_schema": schema.model_copy(update=update)})


class ListToolsRequest(PaginatedRequest):
    METHOD: ClassVar[str] = "tools/list"


class ListToolsResult(PaginatedResult):
    tools: List[Tool]


class CallToolRequest(WireModel):
    """Params of ``tools/call``."""

    METHOD: ClassVar[str] = "tools/call"

    name: str
    arguments: Optional[Dict[str, Any]] = None


class CallToolResult(WireModel):
    """
    Outcome of a tool call.

    ``is_error`` reports a failure inside the tool. It is separate from the
    JSON-RPC error channel: the call itself still succeeded.
    """

    content: List[ToolResultContent]
    is_error: Optional[bool] = None

    @classmethod
    def of_text(cls, text: str) -> "CallToolResult":
        return cls(content=[TextContent.of(text)])

    @classmethod
    def failure(cls, message: str) -> "CallToolResult":
        return cls(content=[TextContent.of(message)], is_error=True)


class ToolListChangedNotification(WireModel):
    METHOD: ClassVar[str] = "notifications/tools/list_changed"
