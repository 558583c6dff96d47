"""
Encoding and decoding of MCP messages at the byte boundary.
"""

import json
from typing import Any, Dict, Tuple, Type, TypeVar, Union

import structlog
from pydantic import ValidationError

from mcp_types.config import settings
from mcp_types.exceptions import DecodeError
from mcp_types.models.base import WireModel
from mcp_types.models.jsonrpc import Notification, Request, Response

log = structlog.get_logger()

M = TypeVar("M", bound=WireModel)

Message = Union[Request, Notification, Response]

RawMessage = Union[str, bytes, bytearray, Dict[str, Any]]


def encode(model: WireModel) -> str:
    """Encode a model as JSON text."""
    return model.to_json()


def encode_dict(model: WireModel) -> Dict[str, Any]:
    """Encode a model as a JSON-ready dict."""
    return model.to_wire()


def _load(raw: Any) -> Any:
    if not isinstance(raw, (str, bytes, bytearray)):
        return raw
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        _log_failure("invalid_json", error=str(e))
        raise DecodeError(f"Invalid JSON format: {str(e)}") from e


def _log_failure(reason: str, **fields: Any) -> None:
    if settings.LOG_DECODE_FAILURES:
        log.debug("Rejected MCP payload", reason=reason, **fields)


def decode(raw: Any, model: Type[M]) -> M:
    """
    Decode ``raw`` into ``model``.

    Args:
        raw: JSON text, UTF-8 bytes, or an already parsed JSON value
        model: The wire model to decode into

    Returns:
        The decoded model instance

    Raises:
        DecodeError: If the payload is not valid JSON or does not fit the model
    """
    data = _load(raw)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        _log_failure("validation", model=model.__name__, errors=e.error_count())
        raise DecodeError(
            f"Validation error for {model.__name__}: {str(e)}", e.errors()
        ) from e


def decode_message(raw: RawMessage) -> Message:
    """
    Decode a top-level JSON-RPC message, picking its kind from the keys present.

    An object with ``method`` and ``id`` is a request, ``method`` alone is a
    notification, anything else is treated as a response.
    """
    data = _load(raw)
    if not isinstance(data, dict):
        _log_failure("not_an_object", kind=type(data).__name__)
        raise DecodeError("JSON-RPC message must be an object")

    if "method" in data:
        model = Request if "id" in data else Notification
    else:
        model = Response
    return decode(data, model)


def validate_message(
    raw: Any, model: Type[M]
) -> Tuple[bool, Union[M, str]]:
    """
    Validate that ``raw`` can be decoded into ``model`` without raising.

    Returns:
        A tuple containing:
        - bool: True if decoding was successful, False otherwise
        - Union[model, str]: Either the decoded model or an error message
    """
    try:
        return True, decode(raw, model)
    except DecodeError as e:
        return False, str(e)
