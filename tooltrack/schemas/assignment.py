import enum
from datetime import date
from typing import Literal, Union
from pydantic import BaseModel
from tooltrack.schemas.employee import EmployeeId
from tooltrack.schemas.tool import Tool, ToolId


class AssignmentErrorCode(str, enum.Enum):
    tool_not_found = "tool_not_found"
    employee_not_found = "employee_not_found"
    already_assigned_same = "already_assigned_same"
    already_assigned_other = "already_assigned_other"
    calibration_overdue = "calibration_overdue"
    not_assigned = "not_assigned"


class AssignRequest(BaseModel):
    tool_id: ToolId
    employee_id: EmployeeId
    assigned_on: date | None = None  # defaults to today in service


class UnassignRequest(BaseModel):
    tool_id: ToolId


class AssignmentChange(BaseModel):
    """Desired assignee for a tool; None clears the assignment."""
    employee_id: EmployeeId | None = None
    assigned_on: date | None = None


class AssignmentSuccess(BaseModel):
    ok: Literal[True] = True
    tool: Tool


class AssignmentFailure(BaseModel):
    ok: Literal[False] = False
    error: str
    code: AssignmentErrorCode


AssignmentResult = Union[AssignmentSuccess, AssignmentFailure]
