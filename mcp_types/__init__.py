"""
mcp_types - Model Context Protocol wire types

Pydantic models for the JSON-RPC messages exchanged between MCP clients and
servers, with a codec that turns raw JSON into those models and back.
"""

from mcp_types.exceptions import DecodeError, McpProtocolError
from mcp_types.models import *
from mcp_types.utils.codec import (
    decode,
    decode_message,
    encode,
    encode_dict,
    validate_message,
)
