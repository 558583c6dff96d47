"""
Cursor-based pagination shared by every "list" request and result.
"""

from typing import Optional

from mcp_types.models.base import WireModel

# Opaque token handed out by the server; never parsed
Cursor = str


class PaginatedRequest(WireModel):
    """Params of a list request, optionally resuming from a cursor."""

    cursor: Optional[Cursor] = None


class PaginatedResult(WireModel):
    """Result of a list request. ``next_cursor`` is absent on the last page."""

    next_cursor: Optional[Cursor] = None

    @property
    def has_more(self) -> bool:
        return self.next_cursor is not None
