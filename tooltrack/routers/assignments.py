from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from tooltrack.dependencies import get_inventory
from tooltrack.schemas.assignment import (
    AssignmentChange, AssignmentErrorCode, AssignmentFailure, AssignmentResult,
    AssignmentSuccess, AssignRequest, UnassignRequest,
)
from tooltrack.services.inventory_api import InventoryAPI

router = APIRouter(prefix="/api/assignments", tags=["assignments"])

_NOT_FOUND = {AssignmentErrorCode.tool_not_found, AssignmentErrorCode.employee_not_found}
_FAILURE_RESPONSES = {
    404: {"model": AssignmentFailure},
    409: {"model": AssignmentFailure},
}


def failure_response(result: AssignmentFailure) -> JSONResponse:
    status_code = 404 if result.code in _NOT_FOUND else 409
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))


def _respond(result: AssignmentResult):
    if isinstance(result, AssignmentFailure):
        return failure_response(result)
    return result


@router.post("", response_model=AssignmentSuccess, responses=_FAILURE_RESPONSES)
async def assign_tool(data: AssignRequest, inventory: InventoryAPI = Depends(get_inventory)):
    return _respond(await inventory.assign_tool(data.tool_id, data.employee_id, data.assigned_on))


@router.post("/reassign", response_model=AssignmentSuccess, responses=_FAILURE_RESPONSES)
async def reassign_tool(data: AssignRequest, inventory: InventoryAPI = Depends(get_inventory)):
    return _respond(await inventory.reassign_tool(data.tool_id, data.employee_id, data.assigned_on))


@router.post("/unassign", response_model=AssignmentSuccess, responses=_FAILURE_RESPONSES)
async def unassign_tool(data: UnassignRequest, inventory: InventoryAPI = Depends(get_inventory)):
    return _respond(await inventory.unassign_tool(data.tool_id))


@router.put("/{tool_id}", response_model=AssignmentSuccess, responses=_FAILURE_RESPONSES)
async def save_assignment(tool_id: str, data: AssignmentChange, inventory: InventoryAPI = Depends(get_inventory)):
    return _respond(await inventory.save_assignment(tool_id, data.employee_id, data.assigned_on))
