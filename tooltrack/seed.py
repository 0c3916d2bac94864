"""Seed loading: reads the tool inventory and employee directory from JSON.

Both files hold an object keyed by entity id, e.g. ``{"T1": {"id": "T1", ...}}``.
"""
import logging
from pathlib import Path
from pydantic import TypeAdapter
from tooltrack.config import settings
from tooltrack.schemas.employee import Employee
from tooltrack.schemas.tool import Tool

logger = logging.getLogger(__name__)

_tools_adapter = TypeAdapter(dict[str, Tool])
_employees_adapter = TypeAdapter(dict[str, Employee])


def _check_keys(kind: str, records: dict) -> None:
    for key, record in records.items():
        if key != record.id:
            raise ValueError(f"{kind} seed key {key!r} does not match its id {record.id!r}")


def load_tools(path: Path) -> dict[str, Tool]:
    tools = _tools_adapter.validate_json(Path(path).read_bytes())
    _check_keys("Tool", tools)
    return tools


def load_employees(path: Path) -> dict[str, Employee]:
    employees = _employees_adapter.validate_json(Path(path).read_bytes())
    _check_keys("Employee", employees)
    return employees


def load_seed(
    tools_path: Path | None = None,
    employees_path: Path | None = None,
) -> tuple[dict[str, Tool], dict[str, Employee]]:
    tools = load_tools(tools_path or settings.SEED_TOOLS_PATH)
    employees = load_employees(employees_path or settings.SEED_EMPLOYEES_PATH)

    unknown = {t.assigned_to for t in tools.values() if t.assigned_to} - employees.keys()
    if unknown:
        raise ValueError(f"Seed tools reference unknown employees: {', '.join(sorted(unknown))}")

    logger.info("Loaded seed: %d tools, %d employees", len(tools), len(employees))
    return tools, employees
