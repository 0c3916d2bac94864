from fastapi import Request
from tooltrack.services.inventory_api import InventoryAPI


def get_inventory(request: Request) -> InventoryAPI:
    return request.app.state.inventory
