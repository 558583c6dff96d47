"""
Resources, resource templates, and the bodies returned when reading them.
"""

from typing import Annotated, ClassVar, List, Literal, Optional, Union

from pydantic import Field

from mcp_types.models.base import WireModel
from mcp_types.models.pagination import PaginatedRequest, PaginatedResult


class Resource(WireModel):
    """A resource the server can read, identified by a literal URI."""

    uri: str
    name: Optional[str] = None
    description: Optional[str] = None
    mime_type: Optional[str] = None


class ResourceTemplate(WireModel):
    """A family of resources described by a URI template."""

    uri_template: str
    name: Optional[str] = None
    description: Optional[str] = None
    mime_type: Optional[str] = None


class TextResourceContents(WireModel):
    type: Literal["text"] = "text"
    text: str
    uri: str
    mime_type: Optional[str] = None

    @classmethod
    def of(cls, uri: str, text: str, mime_type: str = "text/plain") -> "TextResourceContents":
        return cls(uri=uri, text=text, mime_type=mime_type)


class BlobResourceContents(WireModel):
    """Binary body, base64 encoded."""

    type: Literal["blob"] = "blob"
    blob: str
    uri: str
    mime_type: Optional[str] = None

    @classmethod
    def of(cls, uri: str, blob: str, mime_type: str) -> "BlobResourceContents":
        return cls(uri=uri, blob=blob, mime_type=mime_type)


ResourceContents = Annotated[
    Union[TextResourceContents, BlobResourceContents],
    Field(discriminator="type"),
]


class ListResourcesRequest(PaginatedRequest):
    METHOD: ClassVar[str] = "resources/list"


class ListResourcesResult(PaginatedResult):
    resources: List[Resource]


class ListResourceTemplatesRequest(PaginatedRequest):
    METHOD: ClassVar[str] = "resources/templates/list"


class ListResourceTemplatesResult(PaginatedResult):
    resource_templates: List[ResourceTemplate]


class ReadResourceRequest(WireModel):
    METHOD: ClassVar[str] = "resources/read"

    uri: str


class ReadResourceResult(WireModel):
    """One logical resource may come back as several content blocks."""

    contents: List[ResourceContents]


class SubscribeRequest(WireModel):
    METHOD: ClassVar[str] = "resources/subscribe"

    uri: str


class UnsubscribeRequest(WireModel):
    METHOD: ClassVar[str] = "resources/unsubscribe"

    uri: str


class ResourceUpdatedNotification(WireModel):
    METHOD: ClassVar[str] = "notifications/resources/updated"

    uri: str


class ResourceListChangedNotification(WireModel):
    METHOD: ClassVar[str] = "notifications/resources/list_changed"
