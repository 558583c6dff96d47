"""
Exceptions raised by the MCP type model.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from mcp_types.models.errors import ErrorCode, McpError
    from mcp_types.models.jsonrpc import RequestId, Response


class DecodeError(ValueError):
    """
    Raised where raw JSON becomes structured values and the payload does not fit.

    Covers malformed JSON, wrong shapes, unknown union tags, missing required
    fields and identifiers of an unsupported JSON type.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class McpProtocolError(Exception):
    """
    Carries a protocol-level error out of server code.

    A dispatcher catches this and answers with ``to_response``.
    """

    def __init__(self, error: "McpError"):
        super().__init__(str(error))
        self.error = error

    @property
    def code(self) -> "ErrorCode":
        return self.error.code

    def to_response(self, request_id: "RequestId") -> "Response":
        from mcp_types.models.jsonrpc import Response

        return Response.from_error(request_id, self.error)
