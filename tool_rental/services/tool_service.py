from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, TYPE_CHECKING

from tool_rental.exceptions import NotFound, ValidationError
from tool_rental.models.tool import Tool
from tool_rental.services.common import _clean, _store, to_id, to_money, tool_from_dict
from tool_rental.services.pricing import commission_for

if TYPE_CHECKING:
    from tool_rental.models.store import Store  # noqa: F401

logger = logging.getLogger(__name__)


class ToolService:
    """Tool catalogue: list, create, look up, flip availability."""

    def __init__(self, store: Optional["Store"] = None):
        # tests pass a Store directly; request handlers use the app's store
        self.store = store if store is not None else _store()

    def list_tools(self) -> list[Tool]:
        """All tools in store order (no ordering guarantee)."""
        return [tool_from_dict(d) for d in self.store.list_tools()]

    def create_tool(self, name, description, daily_rate) -> Tool:
        """
        Add a tool to the catalogue; it starts out available.
        Raises ValidationError for a blank name or a non-numeric/negative rate,
        StoreError if the row cannot be written.
        """
        name = _clean(name)
        if not name:
            raise ValidationError("Name is required")
        rate = to_money(daily_rate)
        if rate < 0:
            raise ValidationError("Daily rate cannot be negative")

        tid = self.store.create_tool({
            "name": name,
            "description": _clean(description),
            "daily_rate": rate,
            "available": True,
        })
        logger.info("Created tool %s (%s, %s/day)", tid, name, rate)
        return self.get_tool(tid)

    def get_tool(self, tool_id) -> Tool:
        """Return the tool or raise NotFound."""
        tid = to_id(tool_id)
        tool = tool_from_dict(self.store.get_tool(tid)) if tid is not None else None
        if tool is None:
            raise NotFound(f"Error: tool with ID '{tool_id}' not found")
        return tool

    def mark_unavailable(self, tool_id) -> None:
        """Flip the availability flag to False; calling it again is a no-op."""
        tool = self.get_tool(tool_id)
        if tool.available:
            self.store.update_tool(tool.tool_id, available=False)

    def quote(self, tool_id) -> tuple[Tool, Decimal]:
        """Tool plus the commission a rental of it would carry (rental form preview)."""
        tool = self.get_tool(tool_id)
        return tool, commission_for(tool.daily_rate)
