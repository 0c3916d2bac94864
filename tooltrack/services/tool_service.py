from tooltrack.schemas.pagination import PaginatedResponse, SortOrder
from tooltrack.schemas.tool import Tool, ToolFilter
from tooltrack.services.data_store import DataStore
from tooltrack.services.latency import Latency
from tooltrack.services.paging import (
    coerce_choice, paginate, sort_records, validate_page_args, validate_sort_field,
)


class ToolService:
    """Read-only views over the tool inventory.

    Every tool handed out is a copy; changing it does not touch the store.
    """

    def __init__(self, store: DataStore, latency: Latency):
        self._store = store
        self._latency = latency

    def _matches(self, tool: Tool, query: str) -> bool:
        if (
            query in tool.type.lower()
            or query in tool.model.lower()
            or query in tool.serial_number.lower()
            or query in tool.id.lower()
        ):
            return True
        if tool.assigned_to:
            employee = self._store.employee_by_id(tool.assigned_to)
            if employee:
                return query in employee.name.lower() or query in employee.id.lower()
        return False

    def filter_tools(
        self,
        tools: list[Tool],
        filter: ToolFilter = ToolFilter.all,
        search: str | None = None,
    ) -> list[Tool]:
        """Narrow by assignment state first, then by search text within what is left."""
        filter = coerce_choice(ToolFilter, filter)
        if filter == ToolFilter.assigned:
            tools = [t for t in tools if t.is_assigned]
        elif filter == ToolFilter.available:
            tools = [t for t in tools if not t.is_assigned]

        if search and search.strip():
            query = search.strip().lower()
            tools = [t for t in tools if self._matches(t, query)]
        return tools

    async def get_tools_paginated(
        self,
        page: int,
        page_size: int,
        filter: ToolFilter = ToolFilter.all,
        sort_by: str | None = None,
        sort_order: SortOrder = SortOrder.asc,
        search: str | None = None,
    ) -> PaginatedResponse[Tool]:
        """Filtered, searched, sorted and paginated tools.

        Raises InvalidArgumentError when page < 1, page_size is outside
        1..1000 or sort_by is not a Tool field.
        """
        await self._latency.wait()
        validate_page_args(page, page_size)

        tools = self.filter_tools(self._store.tools(), filter, search)
        if sort_by:
            validate_sort_field(Tool, sort_by)
            tools = sort_records(tools, sort_by, coerce_choice(SortOrder, sort_order))
        return paginate(Tool, tools, page, page_size)

    async def get_tool(self, tool_id: str) -> Tool | None:
        await self._latency.wait()
        tool = self._store.tool_by_id(tool_id)
        return tool.model_copy() if tool else None

    async def get_tools(self, filter: ToolFilter = ToolFilter.all) -> list[Tool]:
        await self._latency.wait()
        return [t.model_copy() for t in self.filter_tools(self._store.tools(), filter)]

    async def search(self, query: str) -> list[Tool]:
        await self._latency.wait()
        # no query means no results here, unlike employee search
        if not query or not query.strip():
            return []
        return [t.model_copy() for t in self.filter_tools(self._store.tools(), ToolFilter.all, query)]
