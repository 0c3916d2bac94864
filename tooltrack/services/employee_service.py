from tooltrack.schemas.employee import Employee
from tooltrack.schemas.pagination import PaginatedResponse, SortOrder
from tooltrack.services.data_store import DataStore
from tooltrack.services.latency import Latency
from tooltrack.services.paging import (
    coerce_choice, paginate, sort_records, validate_page_args, validate_sort_field,
)


def _filter_employees(employees: list[Employee], search: str | None) -> list[Employee]:
    if not search or not search.strip():
        return employees
    query = search.strip().lower()
    return [e for e in employees if query in e.name.lower() or query in e.id.lower()]


class EmployeeService:
    def __init__(self, store: DataStore, latency: Latency):
        self._store = store
        self._latency = latency

    async def get_employees_paginated(
        self,
        page: int,
        page_size: int,
        search: str | None = None,
        sort_by: str | None = None,
        sort_order: SortOrder = SortOrder.asc,
    ) -> PaginatedResponse[Employee]:
        await self._latency.wait()
        validate_page_args(page, page_size)

        employees = _filter_employees(self._store.employees(), search)
        if sort_by:
            validate_sort_field(Employee, sort_by)
            employees = sort_records(employees, sort_by, coerce_choice(SortOrder, sort_order))
        return paginate(Employee, employees, page, page_size)

    async def get_employee(self, employee_id: str) -> Employee | None:
        await self._latency.wait()
        employee = self._store.employee_by_id(employee_id)
        return employee.model_copy() if employee else None

    async def get_employees(self) -> list[Employee]:
        await self._latency.wait()
        return [e.model_copy() for e in self._store.employees()]

    async def search_employees(self, query: str) -> list[Employee]:
        """Blank query returns the whole directory (the picker shows everyone)."""
        await self._latency.wait()
        return [e.model_copy() for e in _filter_employees(self._store.employees(), query)]
