# tests/conftest.py

"""Shared pytest fixtures: apps over an in-memory SQLite engine or the memory store."""

from collections.abc import Generator
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from produto_api.api.dependencies import memory_store
from produto_api.data.database import Base, make_engine, make_session_factory
from produto_api.data.models import ProdutoModel  # noqa: F401
from produto_api.main import create_app
from produto_api.repos.produto_repo import InMemoryStore


@pytest.fixture(autouse=True)
def mock_sleep() -> Generator[None, None, None]:
    """Patch time.sleep globally so tenacity retry loops run instantly."""
    with patch("time.sleep"):
        yield


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory SQLite database shared by every connection of the test."""
    eng = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture(params=["sql", "memory"])
def client(request, engine: Engine) -> Generator[TestClient, None, None]:
    """TestClient over each storage backend."""
    memory_store.clear()
    app = create_app(storage_backend=request.param, engine=engine, create_tables=False)
    with TestClient(app) as c:
        yield c
    memory_store.clear()
