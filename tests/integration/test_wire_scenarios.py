"""
End-to-end wire scenarios and round-trip checks across every message family.
"""

import json

import pytest

from mcp_types.exceptions import DecodeError
from mcp_types.models.errors import ErrorCode, McpError
from mcp_types.models.jsonrpc import LATEST_PROTOCOL_VERSION, Notification, Request, Response
from mcp_types.models.logs import LogEntry
from mcp_types.models.prompts import GetPromptResult, Prompt, PromptArgument, PromptMessage
from mcp_types.models.protocol import (
    ClientCapabilities,
    Implementation,
    InitializeRequest,
    InitializeResult,
    LoggingCapability,
    ResourcesCapability,
    RootsCapability,
    SamplingCapability,
    ServerCapabilities,
    ToolsCapability,
)
from mcp_types.models.resources import (
    BlobResourceContents,
    ListResourcesResult,
    ReadResourceResult,
    Resource,
    TextResourceContents,
)
from mcp_types.models.sampling import (
    CreateMessageRequest,
    CreateMessageResult,
    ModelHint,
    ModelPreferences,
    SamplingMessage,
)
from mcp_types.models.tools import (
    CallToolResult,
    ImageContent,
    ListToolsRequest,
    ListToolsResult,
    ResourceReference,
    TextContent,
    Tool,
    ToolInputSchema,
)
from mcp_types.utils.codec import decode, decode_message, encode

CLIENT = Implementation(name="test-client", version="1.0.0")
SERVER = Implementation(name="test-server", version="0.1.0")


def test_scenario_list_tools_request_without_cursor():
    """A list-tools request with no cursor carries neither params nor cursor."""
    request = Request.for_params(1, ListToolsRequest())

    assert json.loads(encode(request)) == {"jsonrpc": "2.0", "id": 1, "method": "tools/list"}
    assert "cursor" not in encode(request)
    assert "params" not in encode(request)


def test_scenario_call_tool_result_without_is_error():
    """A tool result with one text block and no error flag has no isError key."""
    result = CallToolResult(content=[TextContent(text="The answer is 42")])

    wire = json.loads(encode(result))

    assert wire == {"content": [{"type": "text", "text": "The answer is 42"}]}
    assert "isError" not in wire


def test_scenario_response_with_result_and_null_error_is_rejected():
    """A response with a result and an explicit null error is rejected.

    A key present with a null value is not the same as an absent key, so the
    message carries both outcomes.
    """
    raw = '{"jsonrpc":"2.0","id":"x","result":{},"error":null}'

    with pytest.raises(DecodeError):
        decode_message(raw)
    with pytest.raises(DecodeError):
        decode(raw, Response)


def test_response_with_null_result_and_error_is_rejected():
    """The strict rule applies to a null result next to an error too."""
    raw = '{"jsonrpc":"2.0","id":1,"result":null,"error":{"code":-32603,"message":"boom"}}'

    with pytest.raises(DecodeError):
        decode_message(raw)


def test_response_with_lone_null_result_is_rejected():
    """A null result cannot stand for success because it re-encodes as absent."""
    with pytest.raises(DecodeError):
        decode_message('{"jsonrpc":"2.0","id":1,"result":null}')


def test_tool_call_failure_is_not_a_protocol_error():
    """A tool reporting failure is still a successful JSON-RPC response."""
    response = Response.success(9, CallToolResult.failure("file not found"))

    decoded = decode_message(encode(response))

    assert isinstance(decoded, Response)
    assert decoded.is_error is False
    assert decoded.result_as(CallToolResult).is_error is True


def test_protocol_error_round_trips_as_data():
    """Protocol errors are ordinary decoded data, not decode failures."""
    response = Response.from_error("q", McpError.with_data(ErrorCode.INVALID_PARAMS, "bad", [1, 2]))

    decoded = decode_message(encode(response))

    assert decoded == response
    assert decoded.error.code is ErrorCode.INVALID_PARAMS


SNAPSHOTS = {
    "initialize_request": lambda: Request.for_params(
        1,
        InitializeRequest.new(
            CLIENT,
            ClientCapabilities(
                roots=RootsCapability(list_changed=True),
                sampling=SamplingCapability(),
            ),
        ),
    ),
    "initialize_result": lambda: Response.success(
        1,
        InitializeResult(
            protocol_version=LATEST_PROTOCOL_VERSION,
            capabilities=ServerCapabilities(
                tools=ToolsCapability(list_changed=True),
                resources=ResourcesCapability(subscribe=True),
                logging=LoggingCapability(),
            ),
            server_info=SERVER,
        ),
    ),
    "list_tools_result": lambda: Response.success(
        2,
        ListToolsResult(
            tools=[
                Tool.new("calculate", "Perform mathematical calculations").with_parameter(
                    "expression", "Mathematical expression to evaluate", True
                )
            ],
            next_cursor="page-2",
        ),
    ),
    "read_resource_result": lambda: Response.success(
        "read-1",
        ReadResourceResult(
            contents=[
                TextResourceContents.of("file:///notes.txt", "hello"),
                BlobResourceContents.of("file:///logo.png", "iVBORw0KGgo=", "image/png"),
            ]
        ),
    ),
    "method_not_found": lambda: Response.from_error(3, McpError.method_not_found("tools/unknown")),
    "create_message_request": lambda: Request.for_params(
        "s-1",
        CreateMessageRequest(
            messages=[SamplingMessage.text("user", "What is 2+2?")],
            model_preferences=ModelPreferences(
                hints=[ModelHint(name="claude-3")], intelligence_priority=0.8
            ),
            system_prompt="You are terse.",
            max_tokens=64,
        ),
    ),
}


@pytest.mark.parametrize("name", sorted(SNAPSHOTS))
def test_wire_snapshots(name, wire_snapshot):
    """Encoded messages match their stored wire form."""
    message = SNAPSHOTS[name]()

    wire_snapshot(name, json.loads(encode(message)))


ROUND_TRIP_CASES = [
    Request.new("a", "tools/call", {"name": "echo", "arguments": {"text": None}}),
    Notification.new("notifications/cancelled", {"requestId": 4, "reason": "timeout"}),
    Response.success(None, {}),
    Response.from_error(7, McpError.parse_error("Parse error")),
    InitializeRequest.new(CLIENT, ClientCapabilities(experimental={"x": {"y": [1, None]}})),
    InitializeResult(
        protocol_version=LATEST_PROTOCOL_VERSION,
        capabilities=ServerCapabilities(logging=LoggingCapability()),
        server_info=SERVER,
        instructions="hi",
    ),
    ListToolsResult(
        tools=[
            Tool(
                name="grep",
                input_schema=ToolInputSchema(
                    type="object",
                    properties={"pattern": {"type": "string"}},
                    **{"additionalProperties": False},
                ),
            )
        ]
    ),
    CallToolResult(
        content=[
            TextContent(text="t"),
            ImageContent(data="QQ==", mime_type="image/png"),
            ResourceReference(resource="file:///r"),
        ],
        is_error=False,
    ),
    ListResourcesResult(resources=[Resource(uri="file:///a", mime_type="text/plain")]),
    ReadResourceResult(contents=[TextResourceContents(text="x", uri="file:///a")]),
    Prompt(name="p", arguments=[PromptArgument(name="a", required=False)]),
    GetPromptResult(messages=[PromptMessage.text("assistant", "ok")]),
    CreateMessageResult(message=SamplingMessage.image("assistant", "QQ==", "image/png")),
    LogEntry.with_logger("critical", {"disk": "/"}, "storage"),
]


@pytest.mark.parametrize("message", ROUND_TRIP_CASES, ids=lambda m: type(m).__name__)
def test_round_trip(message):
    """encode, decode, encode gives the same JSON and decoding gives an equal value."""
    first = encode(message)
    decoded = decode(first, type(message))
    second = encode(decoded)

    assert json.loads(second) == json.loads(first)
    assert decoded == message
    assert decode(second, type(message)) == decoded
