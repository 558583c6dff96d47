"""
LLM sampling requested by a server through the client.
"""

from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import Field

from mcp_types.models.base import WireModel

MessageRole = Literal["user", "assistant", "system"]


# Sampling messages never point at server resources, so there is no
# resource variant here.


class SamplingTextContent(WireModel):
    type: Literal["text"] = "text"
    text: str

    @classmethod
    def of(cls, text: str) -> "SamplingTextContent":
        return cls(text=text)


class SamplingImageContent(WireModel):
    type: Literal["image"] = "image"
    data: str
    mime_type: str

    @classmethod
    def of(cls, data: str, mime_type: str) -> "SamplingImageContent":
        return cls(data=data, mime_type=mime_type)


SamplingContent = Annotated[
    Union[SamplingTextContent, SamplingImageContent],
    Field(discriminator="type"),
]


class SamplingMessage(WireModel):
    role: MessageRole
    content: SamplingContent

    @classmethod
    def text(cls, role: MessageRole, text: str) -> "SamplingMessage":
        return cls(role=role, content=SamplingTextContent.of(text))

    @classmethod
    def image(cls, role: MessageRole, data: str, mime_type: str) -> "SamplingMessage":
        return cls(role=role, content=SamplingImageContent.of(data, mime_type))


class ModelHint(WireModel):
    """Model name or family, e.g. "claude-3" or "gpt-4"."""

    name: str


class ModelPreferences(WireModel):
    """Priorities range from 0.0 (least important) to 1.0 (most important)."""

    hints: Optional[List[ModelHint]] = None
    cost_priority: Optional[float] = None
    speed_priority: Optional[float] = None
    intelligence_priority: Optional[float] = None


class CreateMessageRequest(WireModel):
    """Params of ``sampling/createMessage``."""

    METHOD: ClassVar[str] = "sampling/createMessage"

    messages: List[SamplingMessage]
    model_preferences: Optional[ModelPreferences] = None
    system_prompt: Optional[str] = None
    include_context: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    stop: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None

    # model_preferences is a wire field, not part of the pydantic API
    model_config = {"protected_namespaces": ()}


class CreateMessageResult(WireModel):
    message: SamplingMessage
    model: Optional[str] = None
    stop_reason: Optional[str] = None
