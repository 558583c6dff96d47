"""
Shared base model for every structure exchanged on the wire.
"""

from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, model_serializer
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """
    Base class for MCP wire structures.

    Field names are snake_case in Python and camelCase on the wire. Optional
    fields left as ``None`` are dropped from the encoded object instead of
    being written as ``null``; required fields are always written.
    """

    # Collections dropped from the wire while empty and never explicitly set
    omit_empty_default: ClassVar[FrozenSet[str]] = frozenset()

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }

    @model_serializer(mode="wrap")
    def omit_absent_fields(self, handler):
        data = handler(self)
        if not isinstance(data, dict):
            return data

        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            absent = value is None and not field.is_required()
            empty = (
                name in self.omit_empty_default
                and not value
                and name not in self.model_fields_set
            )
            if absent or empty:
                data.pop(field.alias or name, None)
                data.pop(name, None)
        return data

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON-ready dict form, camelCase keys and absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Return the encoded JSON text."""
        return self.model_dump_json(by_alias=True)
