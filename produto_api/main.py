# produto_api/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.engine import Engine

from produto_api.api.dependencies import get_repo, repo_provider
from produto_api.api.routers import health, produtos
from produto_api.data import database
from produto_api.data.database import Base, make_session_factory
from produto_api.utils.logging import get_logger
from produto_api.utils.retry import db_retry
from produto_api.utils import settings

# import modeli przed create_all, zeby trafily do Base.metadata
from produto_api.data.models import ProdutoModel  # noqa: F401

logger = get_logger(__name__)


def init_database(engine: Engine, attempts: int | None = None) -> None:
    """Czeka az baza odpowie (retry) i tworzy brakujace tabele."""

    @db_retry(attempts)
    def _connect_and_create():
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        Base.metadata.create_all(bind=engine)

    logger.info(f"Initializing database, models: {list(Base.metadata.tables.keys())}")
    try:
        _connect_and_create()
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise
    logger.info("Database tables ready")


def create_app(
    storage_backend: str | None = None,
    engine: Engine | None = None,
    create_tables: bool | None = None,
) -> FastAPI:
    backend = storage_backend or settings.STORAGE_BACKEND
    engine = engine or database.engine
    if create_tables is None:
        create_tables = settings.CREATE_TABLES_ON_STARTUP

    #zly backend ma wywalic start, nie pierwszy request
    provider = repo_provider(backend)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if backend == "sql" and create_tables:
            init_database(engine)
        logger.info(f"Produto API started (storage backend: {backend})")
        yield
        logger.info("Produto API stopped")

    app = FastAPI(
        title="Produto API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.storage_backend = backend
    app.state.engine = engine
    app.state.session_factory = (
        database.SessionLocal if engine is database.engine else make_session_factory(engine)
    )

    #DI: wybrana implementacja repo
    app.dependency_overrides[get_repo] = provider

    # Include routers
    app.include_router(health.router)
    app.include_router(produtos.router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
