from tooltrack.schemas.employee import Employee, EmployeeId
from tooltrack.schemas.tool import Tool, ToolId, ToolType, ToolFilter, CalibrationStatus
from tooltrack.schemas.pagination import SortOrder, PaginationMeta, PaginatedResponse
from tooltrack.schemas.assignment import (
    AssignmentErrorCode, AssignRequest, UnassignRequest, AssignmentChange,
    AssignmentSuccess, AssignmentFailure, AssignmentResult,
)
from tooltrack.schemas.certificate import CertificateSuccess, CertificateFailure, CertificateResult

__all__ = [
    "Employee", "EmployeeId",
    "Tool", "ToolId", "ToolType", "ToolFilter", "CalibrationStatus",
    "SortOrder", "PaginationMeta", "PaginatedResponse",
    "AssignmentErrorCode", "AssignRequest", "UnassignRequest", "AssignmentChange",
    "AssignmentSuccess", "AssignmentFailure", "AssignmentResult",
    "CertificateSuccess", "CertificateFailure", "CertificateResult",
]
