from fastapi import APIRouter, Depends, HTTPException, Query
from tooltrack.dependencies import get_inventory
from tooltrack.schemas.pagination import PaginatedResponse, SortOrder
from tooltrack.schemas.tool import CalibrationStatus, Tool, ToolFilter
from tooltrack.services.inventory_api import InventoryAPI

router = APIRouter(prefix="/api/tools", tags=["tools"])


@router.get("", response_model=PaginatedResponse[Tool])
async def list_tools(
    page: int = Query(1),
    page_size: int = Query(10),
    filter: ToolFilter = Query(ToolFilter.all),
    sort_by: str | None = Query(None),
    sort_order: SortOrder = Query(SortOrder.asc),
    search: str = Query(""),
    inventory: InventoryAPI = Depends(get_inventory),
):
    # bounds are checked by the engine, InvalidArgumentError -> 422
    return await inventory.get_tools_paginated(page, page_size, filter, sort_by, sort_order, search)


@router.get("/all", response_model=list[Tool])
async def all_tools(
    filter: ToolFilter = Query(ToolFilter.all),
    inventory: InventoryAPI = Depends(get_inventory),
):
    return await inventory.get_tools(filter)


@router.get("/search", response_model=list[Tool])
async def search_tools(q: str = Query(""), inventory: InventoryAPI = Depends(get_inventory)):
    return await inventory.search(q)


@router.get("/{tool_id}", response_model=Tool)
async def get_tool(tool_id: str, inventory: InventoryAPI = Depends(get_inventory)):
    tool = await inventory.get_tool(tool_id)
    if not tool:
        raise HTTPException(status_code=404, detail="Tool not found")
    return tool


@router.get("/{tool_id}/calibration", response_model=CalibrationStatus)
async def tool_calibration(tool_id: str, inventory: InventoryAPI = Depends(get_inventory)):
    status = await inventory.get_calibration_status(tool_id)
    if not status:
        raise HTTPException(status_code=404, detail="Tool not found")
    return status
