import pytest
from fastapi.testclient import TestClient

from tea_store.database import TeaStore
from tea_store.main import create_app


@pytest.fixture
def client():
    """Fresh app per test, so the store is empty and ids start at 1."""
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def store():
    return TeaStore()


@pytest.fixture
def green_tea():
    return {"name": "Green", "price": 5}
