"""
Capability negotiation and the initialize handshake.

A sub-capability that is absent means the feature is not supported. A
sub-capability that is present, even with every flag unset, means the feature
is supported with the indicated options.
"""

from typing import Any, ClassVar, Dict, FrozenSet, List, Optional

from pydantic import Field

from mcp_types.models.base import WireModel
from mcp_types.models.jsonrpc import LATEST_PROTOCOL_VERSION


class ToolsCapability(WireModel):
    list_changed: Optional[bool] = None


class ResourcesCapability(WireModel):
    subscribe: Optional[bool] = None
    list_changed: Optional[bool] = None


class PromptsCapability(WireModel):
    list_changed: Optional[bool] = None


class LoggingCapability(WireModel):
    """Marker: the server emits log messages."""


class RootsCapability(WireModel):
    list_changed: Optional[bool] = None


class SamplingCapability(WireModel):
    """Marker: the client can sample from an LLM on the server's behalf."""


class ServerCapabilities(WireModel):
    """Capabilities a server advertises in its initialize result."""

    omit_empty_default: ClassVar[FrozenSet[str]] = frozenset({"experimental"})

    tools: Optional[ToolsCapability] = None
    resources: Optional[ResourcesCapability] = None
    prompts: Optional[PromptsCapability] = None
    logging: Optional[LoggingCapability] = None
    experimental: Dict[str, Any] = Field(default_factory=dict)


class ClientCapabilities(WireModel):
    """Capabilities a client advertises in its initialize request."""

    omit_empty_default: ClassVar[FrozenSet[str]] = frozenset({"experimental"})

    roots: Optional[RootsCapability] = None
    sampling: Optional[SamplingCapability] = None
    experimental: Dict[str, Any] = Field(default_factory=dict)


class Implementation(WireModel):
    """Name and version of a client or server implementation."""

    name: str
    version: str


class InitializeRequest(WireModel):
    """Params of the ``initialize`` request sent by the client."""

    METHOD: ClassVar[str] = "initialize"

    protocol_version: str
    capabilities: ClientCapabilities
    client_info: Implementation

    @classmethod
    def new(
        cls,
        client_info: Implementation,
        capabilities: Optional[ClientCapabilities] = None,
        protocol_version: str = LATEST_PROTOCOL_VERSION,
    ) -> "InitializeRequest":
        return cls(
            protocol_version=protocol_version,
            capabilities=capabilities or ClientCapabilities(),
            client_info=client_info,
        )


class InitializeResult(WireModel):
    """Result of the ``initialize`` request."""

    protocol_version: str
    capabilities: ServerCapabilities
    server_info: Implementation
    instructions: Optional[str] = None


class InitializedNotification(WireModel):
    """Sent by the client once it has processed the initialize result."""

    METHOD: ClassVar[str] = "notifications/initialized"


class PingRequest(WireModel):
    METHOD: ClassVar[str] = "ping"


class EmptyResult(WireModel):
    """Result of requests that only acknowledge, such as ``ping``."""


class Root(WireModel):
    """A directory or file the client exposes to the server."""

    uri: str
    name: Optional[str] = None


class ListRootsRequest(WireModel):
    METHOD: ClassVar[str] = "roots/list"


class ListRootsResult(WireModel):
    roots: List[Root]


class RootsListChangedNotification(WireModel):
    METHOD: ClassVar[str] = "notifications/roots/list_changed"
