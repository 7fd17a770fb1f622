from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import main


@pytest.fixture
def client() -> TestClient:
    # No context manager: the lifespan (and its DB pool) is not started.
    return TestClient(main.app, raise_server_exceptions=False)


@pytest.fixture
def calls() -> list:
    return []
