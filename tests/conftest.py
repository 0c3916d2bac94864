import pytest
from datetime import date
from tooltrack.schemas.employee import Employee
from tooltrack.schemas.tool import Tool, ToolType
from tooltrack.services.inventory_api import InventoryAPI

TODAY = date(2025, 6, 1)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def seed_tools():
    return {
        "T1": Tool(
            id="T1", type=ToolType.HydraulicWrench, model="HXD-3000",
            serial_number="SN-001", calibration_due_date=date(2099, 1, 1),
        ),
        "T2": Tool(
            id="T2", type=ToolType.PneumaticWrench, model="PW-850",
            serial_number="SN-002", calibration_due_date=date(2000, 1, 1),
        ),
        "T3": Tool(
            id="T3", type=ToolType.Tensioner, model="BT-M24",
            serial_number="SN-003", calibration_due_date=date(2030, 6, 30),
            assigned_to="E2", assigned_on=date(2025, 1, 10),
        ),
    }


@pytest.fixture
def seed_employees():
    return {
        "E1": Employee(id="E1", name="Alice"),
        "E2": Employee(id="E2", name="Bob"),
        "E3": Employee(id="E3", name="Carla"),
    }


@pytest.fixture
def inventory(seed_tools, seed_employees, today):
    return InventoryAPI(seed_tools, seed_employees, delay_ms=0, clock=lambda: today)
