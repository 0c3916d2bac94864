from collections.abc import Callable, Iterable, Mapping
from datetime import date, datetime, timezone
from tooltrack.schemas.employee import Employee
from tooltrack.schemas.tool import Tool


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _values(collection):
    return collection.values() if isinstance(collection, Mapping) else collection


class DataStore:
    """Owns the working copies of the tool inventory and employee directory.

    The seed collections are deep-copied on construction, so callers may keep
    mutating their own objects without affecting the store. Only the
    assignment service writes to the tools held here.
    """

    def __init__(
        self,
        tools: Mapping[str, Tool] | Iterable[Tool],
        employees: Mapping[str, Employee] | Iterable[Employee],
        clock: Callable[[], date] | None = None,
    ):
        self._tools: dict[str, Tool] = {t.id: t.model_copy(deep=True) for t in _values(tools)}
        self._employees: dict[str, Employee] = {e.id: e.model_copy(deep=True) for e in _values(employees)}
        self._clock = clock or utc_today

    def tool_by_id(self, tool_id: str) -> Tool | None:
        return self._tools.get(tool_id)

    def employee_by_id(self, employee_id: str) -> Employee | None:
        return self._employees.get(employee_id)

    def tools(self) -> list[Tool]:
        return list(self._tools.values())

    def employees(self) -> list[Employee]:
        return list(self._employees.values())

    def today(self) -> date:
        return self._clock()
