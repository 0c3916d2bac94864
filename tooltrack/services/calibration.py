from datetime import date
from tooltrack.schemas.tool import Tool, CalibrationStatus


def days_until_due(tool: Tool, today: date) -> int:
    return (tool.calibration_due_date - today).days


def is_calibration_expired(tool: Tool, today: date) -> bool:
    # the due date itself is still a valid day
    return tool.calibration_due_date < today


def calibration_label(days: int) -> str:
    if days < 0:
        return "overdue"
    if days == 0:
        return "today"
    if days == 1:
        return "in 1 day"
    return f"in {days} days"


def calibration_status(tool: Tool, today: date) -> CalibrationStatus:
    days = days_until_due(tool, today)
    return CalibrationStatus(
        tool_id=tool.id,
        calibration_due_date=tool.calibration_due_date,
        days_remaining=days,
        expired=days < 0,
        label=calibration_label(days),
    )
