import pytest
from fastapi.testclient import TestClient
from tooltrack.dependencies import get_inventory
from tooltrack.main import app


@pytest.fixture(scope="function")
def client(inventory):
    app.dependency_overrides[get_inventory] = lambda: inventory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
