from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from tooltrack import __version__
from tooltrack.config import settings
from tooltrack.exceptions import InvalidArgumentError
from tooltrack.routers import health, tools, employees, assignments, certificates
from tooltrack.seed import load_seed
from tooltrack.services.inventory_api import InventoryAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    # The engine lives for the whole process; nothing is persisted on shutdown
    tool_seed, employee_seed = load_seed()
    application.state.inventory = InventoryAPI(tool_seed, employee_seed, delay_ms=settings.LATENCY_MS)
    logger.info("Inventory engine ready (latency %d ms, env %s)", settings.LATENCY_MS, settings.APP_ENV)
    yield


app = FastAPI(
    title="ToolTrack",
    description="Calibrated tool inventory and employee assignment service",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(InvalidArgumentError)
async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


app.include_router(health.router)
app.include_router(tools.router)
app.include_router(employees.router)
app.include_router(assignments.router)
app.include_router(certificates.router)
