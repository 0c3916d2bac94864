import enum
from datetime import date
from typing import Annotated
from pydantic import BaseModel, Field, model_validator
from tooltrack.schemas.employee import EmployeeId

ToolId = Annotated[str, Field(pattern=r"^T\d+$")]


class ToolType(str, enum.Enum):
    HydraulicWrench = "HydraulicWrench"
    PneumaticWrench = "PneumaticWrench"
    Tensioner = "Tensioner"
    TorqueGun = "TorqueGun"
    TorqueMultiplier = "TorqueMultiplier"


class ToolFilter(str, enum.Enum):
    all = "all"
    assigned = "assigned"          # assigned_to is set
    available = "available"        # assigned_to is None


class Tool(BaseModel):
    id: ToolId
    type: ToolType
    model: str
    serial_number: str
    calibration_due_date: date     # last day the tool counts as calibrated
    assigned_to: EmployeeId | None = None
    assigned_on: date | None = None

    @model_validator(mode="after")
    def check_assignment_fields_paired(self) -> "Tool":
        if (self.assigned_to is None) != (self.assigned_on is None):
            raise ValueError("assigned_to and assigned_on must be set together")
        return self

    @property
    def is_assigned(self) -> bool:
        return self.assigned_to is not None


class CalibrationStatus(BaseModel):
    tool_id: ToolId
    calibration_due_date: date
    days_remaining: int
    expired: bool
    label: str
