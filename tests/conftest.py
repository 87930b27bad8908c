import pytest
from fastapi.testclient import TestClient

from main import app
from seed import seed_catalog
from storage import MemStorage


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def seeded_storage():
    s = MemStorage()
    seed_catalog(s)
    return s


@pytest.fixture
def client():
    # entering the client runs startup, which builds a fresh seeded store
    with TestClient(app) as c:
        yield c
