"""
Pydantic models for the Model Context Protocol wire format.

This package contains every structure exchanged between an MCP client and
server: the JSON-RPC envelope, errors, capabilities, and the tool, resource,
prompt, sampling and logging payloads.
"""

from mcp_types.models.base import *
from mcp_types.models.errors import *
from mcp_types.models.jsonrpc import *
from mcp_types.models.pagination import *
from mcp_types.models.protocol import *
from mcp_types.models.tools import *
from mcp_types.models.resources import *
from mcp_types.models.prompts import *
from mcp_types.models.sampling import *
from mcp_types.models.logs import *
