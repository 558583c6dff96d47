"""
JSON-RPC 2.0 envelope: identifiers, requests, notifications and responses.
"""

from typing import Annotated, Any, Literal, Optional, Type, TypeVar, Union

from pydantic import (
    BaseModel,
    Field,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from mcp_types.exceptions import DecodeError, McpProtocolError
from mcp_types.models.base import WireModel
from mcp_types.models.errors import McpError

JSONRPC_VERSION = "2.0"
LATEST_PROTOCOL_VERSION = "2024-11-05"

# String, signed 64-bit integer or null. Both members are strict, so a JSON
# value matches at most one of them and floats, booleans, arrays and objects
# match none.
RequestId = Optional[
    Union[StrictStr, Annotated[StrictInt, Field(ge=-(2**63), le=2**63 - 1)]]
]

M = TypeVar("M", bound=WireModel)

_request_id_adapter = TypeAdapter(RequestId)


def parse_request_id(value: Any) -> Union[str, int, None]:
    """Resolve an untyped JSON value into a request identifier."""
    try:
        return _request_id_adapter.validate_python(value)
    except ValidationError as e:
        raise DecodeError(f"Unsupported request id: {value!r}", e.errors()) from e


def _payload(value: Any) -> Any:
    # Typed models are stored in their wire form so decoded values compare equal
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return value


def _validate_payload(model: Type[M], payload: Any, what: str) -> M:
    try:
        return model.model_validate({} if payload is None else payload)
    except ValidationError as e:
        raise DecodeError(
            f"Invalid {what} for {model.__name__}: {e}", e.errors()
        ) from e


def _method_of(params: WireModel) -> str:
    method = getattr(params, "METHOD", None)
    if method is None:
        raise TypeError(f"{type(params).__name__} is not bound to a method")
    return method


class Request(WireModel):
    """A request that expects a response."""

    jsonrpc: Literal["2.0"]
    id: RequestId
    method: str
    params: Optional[Any] = None

    @classmethod
    def new(cls, request_id: RequestId, method: str, params: Any = None) -> "Request":
        return cls(
            jsonrpc=JSONRPC_VERSION, id=request_id, method=method, params=_payload(params)
        )

    @classmethod
    def for_params(cls, request_id: RequestId, params: WireModel) -> "Request":
        """Build a request from a typed params model, e.g. ``ListToolsRequest()``."""
        return cls.new(request_id, _method_of(params), params.to_wire() or None)

    def params_as(self, model: Type[M]) -> M:
        return _validate_payload(model, self.params, "params")


class Notification(WireModel):
    """A message that expects no response."""

    jsonrpc: Literal["2.0"]
    method: str
    params: Optional[Any] = None

    @classmethod
    def new(cls, method: str, params: Any = None) -> "Notification":
        return cls(jsonrpc=JSONRPC_VERSION, method=method, params=_payload(params))

    @classmethod
    def for_params(cls, params: WireModel) -> "Notification":
        return cls.new(_method_of(params), params.to_wire() or None)

    def params_as(self, model: Type[M]) -> M:
        return _validate_payload(model, self.params, "params")


class Response(WireModel):
    """
    Reply to a request, carrying exactly one of ``result`` or ``error``.

    Build responses with ``success`` or ``from_error``. The invariant is also
    checked on every decode: a key that is present with a null value counts
    as present, so ``{"result": {}, "error": null}`` is rejected.
    """

    jsonrpc: Literal["2.0"]
    id: RequestId
    result: Optional[Any] = None
    error: Optional[McpError] = None

    @model_validator(mode="after")
    def check_single_outcome(self) -> "Response":
        supplied = {"result", "error"} & self.model_fields_set
        if len(supplied) != 1:
            raise ValueError("response must carry exactly one of 'result' or 'error'")
        if getattr(self, supplied.pop()) is None:
            raise ValueError("response outcome must not be null")
        return self

    @classmethod
    def success(cls, request_id: RequestId, result: Any) -> "Response":
        return cls(jsonrpc=JSONRPC_VERSION, id=request_id, result=_payload(result))

    @classmethod
    def from_error(cls, request_id: RequestId, error: McpError) -> "Response":
        return cls(jsonrpc=JSONRPC_VERSION, id=request_id, error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def result_as(self, model: Type[M]) -> M:
        """Decode the result into ``model``; an error response raises McpProtocolError."""
        if self.error is not None:
            raise McpProtocolError(self.error)
        return _validate_payload(model, self.result, "result")

    def _ensure_single_outcome(self) -> None:
        # Guards instances built with model_construct, which skips validation
        if (self.result is None) == (self.error is None):
            raise ValueError("response must carry exactly one of 'result' or 'error'")

    def to_wire(self):
        self._ensure_single_outcome()
        return super().to_wire()

    def to_json(self) -> str:
        self._ensure_single_outcome()
        return super().to_json()
