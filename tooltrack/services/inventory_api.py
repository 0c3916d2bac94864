from collections.abc import Callable, Iterable, Mapping
from datetime import date
from tooltrack.config import settings
from tooltrack.schemas.assignment import AssignmentResult
from tooltrack.schemas.certificate import CertificateResult
from tooltrack.schemas.employee import Employee
from tooltrack.schemas.pagination import PaginatedResponse, SortOrder
from tooltrack.schemas.tool import CalibrationStatus, Tool, ToolFilter
from tooltrack.services.assignment_service import AssignmentService
from tooltrack.services.calibration import calibration_status
from tooltrack.services.certificate_service import CertificateService
from tooltrack.services.data_store import DataStore
from tooltrack.services.employee_service import EmployeeService
from tooltrack.services.latency import Latency, SimulatedLatency
from tooltrack.services.tool_service import ToolService


class InventoryAPI:
    """Public entry point of the inventory engine.

    Builds a single DataStore from the seed (deep copy) and shares it with the
    tool, employee, assignment and certificate services. All methods are
    coroutines and await the latency strategy before taking effect.

    :param tools: seed tools, keyed by id or as an iterable
    :param employees: seed employees, keyed by id or as an iterable
    :param delay_ms: simulated latency per call, 0 disables it
    :param latency: custom latency strategy, overrides delay_ms
    :param clock: returns "today"; defaults to the current UTC date
    """

    def __init__(
        self,
        tools: Mapping[str, Tool] | Iterable[Tool],
        employees: Mapping[str, Employee] | Iterable[Employee],
        delay_ms: int | None = None,
        latency: Latency | None = None,
        clock: Callable[[], date] | None = None,
        issuer: str | None = None,
        base_url: str | None = None,
    ):
        if latency is None:
            latency = SimulatedLatency(settings.LATENCY_MS if delay_ms is None else delay_ms)
        self._latency = latency
        self._store = DataStore(tools, employees, clock=clock)

        self._tools = ToolService(self._store, latency)
        self._employees = EmployeeService(self._store, latency)
        self._assignments = AssignmentService(self._store, latency)
        self._certificates = CertificateService(
            self._store,
            latency,
            issuer=issuer or settings.CERTIFICATE_ISSUER,
            base_url=base_url or settings.BASE_URL,
        )

    # --- tools ---

    async def get_tools_paginated(
        self,
        page: int,
        page_size: int,
        filter: ToolFilter = ToolFilter.all,
        sort_by: str | None = None,
        sort_order: SortOrder = SortOrder.asc,
        search: str | None = None,
    ) -> PaginatedResponse[Tool]:
        return await self._tools.get_tools_paginated(page, page_size, filter, sort_by, sort_order, search)

    async def get_tool(self, tool_id: str) -> Tool | None:
        return await self._tools.get_tool(tool_id)

    async def get_tools(self, filter: ToolFilter = ToolFilter.all) -> list[Tool]:
        return await self._tools.get_tools(filter)

    async def search(self, query: str) -> list[Tool]:
        return await self._tools.search(query)

    async def get_calibration_status(self, tool_id: str) -> CalibrationStatus | None:
        await self._latency.wait()
        tool = self._store.tool_by_id(tool_id)
        if tool is None:
            return None
        return calibration_status(tool, self._store.today())

    # --- employees ---

    async def get_employees_paginated(
        self,
        page: int,
        page_size: int,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: SortOrder = SortOrder.asc,
    ) -> PaginatedResponse[Employee]:
        return await self._employees.get_employees_paginated(page, page_size, search, sort_by, sort_order)

    async def get_employee(self, employee_id: str) -> Employee | None:
        return await self._employees.get_employee(employee_id)

    async def get_employees(self) -> list[Employee]:
        return await self._employees.get_employees()

    async def search_employees(self, query: str) -> list[Employee]:
        return await self._employees.search_employees(query)

    # --- assignments ---

    async def assign_tool(self, tool_id: str, employee_id: str, assigned_on: date | None = None) -> AssignmentResult:
        return await self._assignments.assign_tool(tool_id, employee_id, assigned_on)

    async def reassign_tool(self, tool_id: str, employee_id: str, assigned_on: date | None = None) -> AssignmentResult:
        return await self._assignments.reassign_tool(tool_id, employee_id, assigned_on)

    async def unassign_tool(self, tool_id: str) -> AssignmentResult:
        return await self._assignments.unassign_tool(tool_id)

    async def save_assignment(
        self, tool_id: str, employee_id: str | None, assigned_on: date | None = None,
    ) -> AssignmentResult:
        return await self._assignments.save_assignment(tool_id, employee_id, assigned_on)

    # --- certificates ---

    async def download_calibration_certificate(self, tool_id: str) -> CertificateResult:
        return await self._certificates.download_calibration_certificate(tool_id)
