import logging
from datetime import date
from tooltrack.schemas.assignment import (
    AssignmentErrorCode, AssignmentFailure, AssignmentResult, AssignmentSuccess,
)
from tooltrack.schemas.employee import Employee
from tooltrack.schemas.tool import Tool
from tooltrack.services.calibration import is_calibration_expired
from tooltrack.services.data_store import DataStore
from tooltrack.services.latency import Latency

logger = logging.getLogger(__name__)


def _fail(code: AssignmentErrorCode, error: str) -> AssignmentFailure:
    logger.info("Assignment rejected (%s): %s", code.value, error)
    return AssignmentFailure(error=error, code=code)


class AssignmentService:
    """Assign, reassign and unassign tools.

    The only writer of tool state. Rule violations come back as
    AssignmentFailure results and are never raised. A mutation sets
    assigned_to and assigned_on together or leaves both untouched.
    """

    def __init__(self, store: DataStore, latency: Latency):
        self._store = store
        self._latency = latency

    def _resolve(self, tool_id: str, employee_id: str) -> tuple[Tool, Employee] | AssignmentFailure:
        tool = self._store.tool_by_id(tool_id)
        if tool is None:
            return _fail(AssignmentErrorCode.tool_not_found, f"Tool with ID {tool_id} does not exist.")
        employee = self._store.employee_by_id(employee_id)
        if employee is None:
            return _fail(AssignmentErrorCode.employee_not_found, f"Employee with ID {employee_id} does not exist.")
        return tool, employee

    def _assign_to_employee(self, tool: Tool, employee: Employee, assigned_on: date | None) -> AssignmentResult:
        today = self._store.today()
        if is_calibration_expired(tool, today):
            return _fail(
                AssignmentErrorCode.calibration_overdue,
                f"Tool with ID {tool.id} is overdue for calibration and cannot be assigned.",
            )
        tool.assigned_to = employee.id
        tool.assigned_on = assigned_on or today
        logger.info("Tool %s assigned to %s on %s", tool.id, employee.id, tool.assigned_on)
        return AssignmentSuccess(tool=tool.model_copy())

    def _assign(self, tool_id: str, employee_id: str, assigned_on: date | None) -> AssignmentResult:
        resolved = self._resolve(tool_id, employee_id)
        if isinstance(resolved, AssignmentFailure):
            return resolved
        tool, employee = resolved
        if tool.assigned_to == employee_id:
            return _fail(
                AssignmentErrorCode.already_assigned_same,
                f"Tool with ID {tool_id} is already assigned to employee {employee_id}.",
            )
        if tool.assigned_to is not None:
            return _fail(
                AssignmentErrorCode.already_assigned_other,
                f"Tool with ID {tool_id} is already assigned to another employee: {tool.assigned_to}.",
            )
        return self._assign_to_employee(tool, employee, assigned_on)

    def _reassign(self, tool_id: str, employee_id: str, assigned_on: date | None) -> AssignmentResult:
        resolved = self._resolve(tool_id, employee_id)
        if isinstance(resolved, AssignmentFailure):
            return resolved
        tool, employee = resolved
        if tool.assigned_to is None:
            return _fail(
                AssignmentErrorCode.not_assigned,
                f"Tool with ID {tool_id} is not currently assigned to any employee.",
            )
        return self._assign_to_employee(tool, employee, assigned_on)

    def _unassign(self, tool_id: str) -> AssignmentResult:
        tool = self._store.tool_by_id(tool_id)
        if tool is None:
            return _fail(AssignmentErrorCode.tool_not_found, f"Tool with ID {tool_id} does not exist.")
        if tool.assigned_to is None:
            return _fail(
                AssignmentErrorCode.not_assigned,
                f"Tool with ID {tool_id} is not currently assigned to any employee.",
            )
        previous = tool.assigned_to
        tool.assigned_to = None
        tool.assigned_on = None
        logger.info("Tool %s unassigned from %s", tool_id, previous)
        return AssignmentSuccess(tool=tool.model_copy())

    async def assign_tool(self, tool_id: str, employee_id: str, assigned_on: date | None = None) -> AssignmentResult:
        await self._latency.wait()
        return self._assign(tool_id, employee_id, assigned_on)

    async def reassign_tool(self, tool_id: str, employee_id: str, assigned_on: date | None = None) -> AssignmentResult:
        """Move an assigned tool to employee_id, even if that is the current holder."""
        await self._latency.wait()
        return self._reassign(tool_id, employee_id, assigned_on)

    async def unassign_tool(self, tool_id: str) -> AssignmentResult:
        await self._latency.wait()
        return self._unassign(tool_id)

    async def save_assignment(
        self,
        tool_id: str,
        employee_id: str | None,
        assigned_on: date | None = None,
    ) -> AssignmentResult:
        """Bring a tool to the desired assignee, choosing the matching transition.

        None as employee_id clears the assignment. When the desired assignee
        already holds the tool (or the tool is free and None is requested)
        nothing changes and the current tool is returned.
        """
        await self._latency.wait()
        tool = self._store.tool_by_id(tool_id)
        if tool is None:
            return _fail(AssignmentErrorCode.tool_not_found, f"Tool with ID {tool_id} does not exist.")

        current = tool.assigned_to
        if current is None and employee_id:
            return self._assign(tool_id, employee_id, assigned_on)
        if current is not None and employee_id and employee_id != current:
            return self._reassign(tool_id, employee_id, assigned_on)
        if current is not None and not employee_id:
            return self._unassign(tool_id)
        return AssignmentSuccess(tool=tool.model_copy())
