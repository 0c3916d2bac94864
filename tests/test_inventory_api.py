"""End-to-end behaviour of the InventoryAPI facade."""
import pytest
from datetime import date
from unittest.mock import AsyncMock, patch

from tooltrack.schemas.tool import ToolFilter
from tooltrack.services.inventory_api import InventoryAPI
from tooltrack.services.latency import SimulatedLatency


class CountingLatency:
    def __init__(self):
        self.calls = 0

    async def wait(self):
        self.calls += 1


# ─── Latency ──────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_every_operation_waits_once(seed_tools, seed_employees, today):
    latency = CountingLatency()
    inventory = InventoryAPI(seed_tools, seed_employees, latency=latency, clock=lambda: today)

    await inventory.get_tools_paginated(page=1, page_size=10)
    await inventory.get_tools()
    await inventory.get_tool("T1")
    await inventory.search("x")
    await inventory.get_employees_paginated(page=1, page_size=10)
    await inventory.get_employees()
    await inventory.get_employee("E1")
    await inventory.search_employees("")
    await inventory.assign_tool("T1", "E1")
    await inventory.reassign_tool("T1", "E2")
    await inventory.unassign_tool("T1")
    await inventory.save_assignment("T1", "E3")
    await inventory.get_calibration_status("T1")
    await inventory.download_calibration_certificate("T1")
    assert latency.calls == 14


@pytest.mark.asyncio
async def test_simulated_latency_sleeps():
    with patch("tooltrack.services.latency.asyncio.sleep", new_callable=AsyncMock) as sleep:
        await SimulatedLatency(250).wait()
        sleep.assert_awaited_once_with(0.25)


@pytest.mark.asyncio
async def test_zero_latency_does_not_sleep():
    with patch("tooltrack.services.latency.asyncio.sleep", new_callable=AsyncMock) as sleep:
        await SimulatedLatency(0).wait()
        sleep.assert_not_awaited()


def test_negative_latency_rejected():
    with pytest.raises(ValueError):
        SimulatedLatency(-1)


# ─── Isolation ────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_seed_mutation_does_not_leak(seed_tools, seed_employees, today):
    inventory = InventoryAPI(seed_tools, seed_employees, delay_ms=0, clock=lambda: today)
    seed_tools["T1"].model = "changed"
    del seed_employees["E1"]
    assert (await inventory.get_tool("T1")).model == "HXD-3000"
    assert (await inventory.assign_tool("T1", "E1")).ok is True
    assert seed_tools["T1"].assigned_to is None


@pytest.mark.asyncio
async def test_instances_are_independent(seed_tools, seed_employees, today):
    first = InventoryAPI(seed_tools, seed_employees, delay_ms=0, clock=lambda: today)
    second = InventoryAPI(seed_tools, seed_employees, delay_ms=0, clock=lambda: today)
    await first.assign_tool("T1", "E1")
    assert (await second.get_tool("T1")).assigned_to is None


@pytest.mark.asyncio
async def test_services_share_one_store(inventory):
    await inventory.assign_tool("T1", "E3")
    assert [t.id for t in await inventory.get_tools(ToolFilter.assigned)] == ["T1", "T3"]
    assert [t.id for t in await inventory.search("carla")] == ["T1"]
    page = await inventory.get_tools_paginated(page=1, page_size=10, filter=ToolFilter.available)
    assert [t.id for t in page.data] == ["T2"]


# ─── Calibration status ───────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_calibration_status(inventory):
    status = await inventory.get_calibration_status("T2")
    assert status.expired is True
    assert status.label == "overdue"
    status = await inventory.get_calibration_status("T3")
    assert status.days_remaining == (date(2030, 6, 30) - date(2025, 6, 1)).days
    assert status.expired is False
    assert await inventory.get_calibration_status("T99") is None


# ─── Invariants across a session ──────────────────────────────────────────────

@pytest.mark.asyncio
async def test_pairing_invariant_holds_after_each_operation(inventory):
    operations = [
        lambda: inventory.assign_tool("T1", "E1"),
        lambda: inventory.assign_tool("T1", "E1"),
        lambda: inventory.assign_tool("T2", "E1"),
        lambda: inventory.reassign_tool("T1", "E2"),
        lambda: inventory.reassign_tool("T2", "E2"),
        lambda: inventory.unassign_tool("T3"),
        lambda: inventory.unassign_tool("T3"),
        lambda: inventory.save_assignment("T3", "E3"),
        lambda: inventory.save_assignment("T1", None),
    ]
    for operation in operations:
        await operation()
        for tool in await inventory.get_tools():
            assert (tool.assigned_to is None) == (tool.assigned_on is None)
