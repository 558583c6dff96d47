"""
Prompt templates, their arguments, and the messages a prompt expands to.
"""

from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import Field

from mcp_types.models.base import WireModel
from mcp_types.models.pagination import PaginatedRequest, PaginatedResult

PromptRole = Literal["user", "assistant", "system"]


class PromptArgument(WireModel):
    name: str
    description: Optional[str] = None
    required: Optional[bool] = None


class Prompt(WireModel):
    name: str
    description: Optional[str] = None
    arguments: Optional[List[PromptArgument]] = None


# Same shapes as tool result content today, but a separate union so the two
# can evolve independently on the wire.


class PromptTextContent(WireModel):
    type: Literal["text"] = "text"
    text: str

    @classmethod
    def of(cls, text: str) -> "PromptTextContent":
        return cls(text=text)


class PromptImageContent(WireModel):
    type: Literal["image"] = "image"
    data: str
    mime_type: str

    @classmethod
    def of(cls, data: str, mime_type: str) -> "PromptImageContent":
        return cls(data=data, mime_type=mime_type)


class PromptResourceReference(WireModel):
    type: Literal["resource"] = "resource"
    resource: str

    @classmethod
    def of(cls, uri: str) -> "PromptResourceReference":
        return cls(resource=uri)


PromptContent = Annotated[
    Union[PromptTextContent, PromptImageContent, PromptResourceReference],
    Field(discriminator="type"),
]


class PromptMessage(WireModel):
    role: PromptRole
    content: PromptContent

    @classmethod
    def text(cls, role: PromptRole, text: str) -> "PromptMessage":
        return cls(role=role, content=PromptTextContent.of(text))


class ListPromptsRequest(PaginatedRequest):
    METHOD: ClassVar[str] = "prompts/list"


class ListPromptsResult(PaginatedResult):
    prompts: List[Prompt]


class GetPromptRequest(WireModel):
    METHOD: ClassVar[str] = "prompts/get"

    name: str
    arguments: Optional[Dict[str, Any]] = None


class GetPromptResult(WireModel):
    """Messages are kept in the order the server produced them."""

    description: Optional[str] = None
    messages: List[PromptMessage]


class PromptListChangedNotification(WireModel):
    METHOD: ClassVar[str] = "notifications/prompts/list_changed"
