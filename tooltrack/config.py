import logging
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
_DEFAULT_TOOLS = _DATA_DIR / "tools.json"
_DEFAULT_EMPLOYEES = _DATA_DIR / "employees.json"


class Settings(BaseSettings):
    APP_ENV: str = "development"
    BASE_URL: str = "http://localhost:8000"
    LATENCY_MS: int = 300
    SEED_TOOLS_PATH: Path = _DEFAULT_TOOLS
    SEED_EMPLOYEES_PATH: Path = _DEFAULT_EMPLOYEES
    CERTIFICATE_ISSUER: str = "ToolTrack Calibration Lab"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()

if settings.APP_ENV == "production":
    if settings.SEED_TOOLS_PATH == _DEFAULT_TOOLS or settings.SEED_EMPLOYEES_PATH == _DEFAULT_EMPLOYEES:
        logger.warning("Running in production with the bundled demo seed, set SEED_TOOLS_PATH / SEED_EMPLOYEES_PATH in .env")
    if settings.LATENCY_MS > 0:
        logger.warning("LATENCY_MS=%d adds simulated latency to every request in production", settings.LATENCY_MS)
