"""
Error codes and the structured error payload carried in JSON-RPC responses.
"""

import re
from enum import IntEnum
from typing import Any, Optional

from pydantic import field_validator

from mcp_types.models.base import WireModel

_NUMERIC_CODE = re.compile(r"-?[0-9]+")


class ErrorCode(IntEnum):
    """Standard JSON-RPC error codes. The wire form is always the integer."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class McpError(WireModel):
    """Error object of a JSON-RPC error response."""

    code: ErrorCode
    message: str
    data: Optional[Any] = None

    @field_validator("code", mode="before")
    @classmethod
    def accept_numeric_string(cls, value: Any) -> Any:
        """Some peers write the code as a string such as "-32600"."""
        if isinstance(value, (bool, float)):
            raise ValueError("error code must be an integer")
        if isinstance(value, str):
            if not _NUMERIC_CODE.fullmatch(value):
                raise ValueError(f"error code is not numeric: {value!r}")
            return int(value)
        return value

    @classmethod
    def new(cls, code: ErrorCode, message: str) -> "McpError":
        return cls(code=code, message=message)

    @classmethod
    def with_data(cls, code: ErrorCode, message: str, data: Any) -> "McpError":
        return cls(code=code, message=message, data=data)

    @classmethod
    def parse_error(cls, message: str) -> "McpError":
        return cls.new(ErrorCode.PARSE_ERROR, message)

    @classmethod
    def invalid_request(cls, message: str) -> "McpError":
        return cls.new(ErrorCode.INVALID_REQUEST, message)

    @classmethod
    def method_not_found(cls, method: str) -> "McpError":
        return cls.new(ErrorCode.METHOD_NOT_FOUND, f"Method not found: {method}")

    @classmethod
    def invalid_params(cls, message: str) -> "McpError":
        return cls.new(ErrorCode.INVALID_PARAMS, message)

    @classmethod
    def internal_error(cls, message: str) -> "McpError":
        return cls.new(ErrorCode.INTERNAL_ERROR, message)

    def __str__(self) -> str:
        return f"{self.message} (code: {self.code.name})"
