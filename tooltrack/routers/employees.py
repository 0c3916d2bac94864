from fastapi import APIRouter, Depends, HTTPException, Query
from tooltrack.dependencies import get_inventory
from tooltrack.schemas.employee import Employee
from tooltrack.schemas.pagination import PaginatedResponse, SortOrder
from tooltrack.services.inventory_api import InventoryAPI

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=PaginatedResponse[Employee])
async def list_employees(
    page: int = Query(1),
    page_size: int = Query(10),
    search: str = Query(""),
    sort_by: str | None = Query(None),
    sort_order: SortOrder = Query(SortOrder.asc),
    inventory: InventoryAPI = Depends(get_inventory),
):
    return await inventory.get_employees_paginated(page, page_size, search, sort_by, sort_order)


@router.get("/all", response_model=list[Employee])
async def all_employees(inventory: InventoryAPI = Depends(get_inventory)):
    return await inventory.get_employees()


@router.get("/search", response_model=list[Employee])
async def search_employees(q: str = Query(""), inventory: InventoryAPI = Depends(get_inventory)):
    return await inventory.search_employees(q)


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: str, inventory: InventoryAPI = Depends(get_inventory)):
    employee = await inventory.get_employee(employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee
