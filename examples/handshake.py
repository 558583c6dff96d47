#!/usr/bin/env python
"""
Example script walking through an MCP handshake and a tool call on the wire.
"""
import structlog

from mcp_types import (
    CallToolRequest,
    CallToolResult,
    ClientCapabilities,
    Implementation,
    InitializeRequest,
    InitializeResult,
    LATEST_PROTOCOL_VERSION,
    ListToolsRequest,
    ListToolsResult,
    McpError,
    McpProtocolError,
    Request,
    Response,
    SamplingCapability,
    ServerCapabilities,
    Tool,
    ToolsCapability,
    decode_message,
    encode,
    validate_message,
)
from mcp_types.logging_config import setup_logging

log = structlog.get_logger()

TOOLS = [
    Tool.new("echo", "Echo the given text back").with_parameter("text", "Text to echo", True),
]


def serve(raw: str) -> str:
    """Answer one encoded request the way a minimal server would."""
    request = decode_message(raw)
    if not isinstance(request, Request):
        error = McpError.invalid_request(f"Expected a request, got {type(request).__name__}")
        return encode(Response.from_error(None, error))

    try:
        if request.method == InitializeRequest.METHOD:
            params = request.params_as(InitializeRequest)
            log.info("Client connected", client=params.client_info.name)
            result = InitializeResult(
                protocol_version=params.protocol_version,
                capabilities=ServerCapabilities(tools=ToolsCapability(list_changed=False)),
                server_info=Implementation(name="echo-server", version="0.1.0"),
            )
        elif request.method == ListToolsRequest.METHOD:
            result = ListToolsResult(tools=TOOLS)
        elif request.method == CallToolRequest.METHOD:
            params = request.params_as(CallToolRequest)
            text = (params.arguments or {}).get("text")
            result = CallToolResult.of_text(text) if text else CallToolResult.failure("text is required")
        else:
            raise McpProtocolError(McpError.method_not_found(request.method))
    except McpProtocolError as e:
        return encode(e.to_response(request.id))

    return encode(Response.success(request.id, result))


def main():
    """Run the handshake example."""
    setup_logging("INFO")

    client_info = Implementation(name="example-client", version="1.0.0")
    initialize = InitializeRequest.new(
        client_info, ClientCapabilities(sampling=SamplingCapability()), LATEST_PROTOCOL_VERSION
    )

    exchanges = [
        Request.for_params(1, initialize),
        Request.for_params(2, ListToolsRequest()),
        Request.for_params(3, CallToolRequest(name="echo", arguments={"text": "hello"})),
        Request.new(4, "tools/unknown"),
    ]

    for request in exchanges:
        raw_request = encode(request)
        raw_response = serve(raw_request)
        print(f"--> {raw_request}")
        print(f"<-- {raw_response}")

    # A peer answering with both outcomes is rejected at the boundary
    is_valid, result = validate_message('{"jsonrpc":"2.0","id":5,"result":{},"error":null}', Response)
    print(f"Strict response check: valid={is_valid} ({result})")


if __name__ == "__main__":
    main()
