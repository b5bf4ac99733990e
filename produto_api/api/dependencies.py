# produto_api/api/dependencies.py
from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from produto_api.repos.produto_repo import InMemoryStore, InMemoryProdutoRepo, ProdutoRepo, SqlProdutoRepo
from produto_api.services.produto_service import ProdutoService
from produto_api.utils.settings import STORAGE_BACKEND

#jeden magazyn na proces dla backendu memory
memory_store = InMemoryStore()


def get_db(request: Request) -> Generator[Session, None, None]:
    #sesja na request, z fabryki przypietej do aplikacji w create_app()
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_sql_repo(db: Session = Depends(get_db)) -> Generator[ProdutoRepo, None, None]:
    repo = SqlProdutoRepo(db)
    try:
        yield repo
    finally:
        repo.rollback()


def get_memory_repo() -> Generator[ProdutoRepo, None, None]:
    repo = InMemoryProdutoRepo(memory_store)
    try:
        yield repo
    finally:
        repo.rollback()


def repo_provider(backend: str = STORAGE_BACKEND):
    """Wybor implementacji repo przy starcie aplikacji."""
    if backend == "sql":
        return get_sql_repo
    if backend == "memory":
        return get_memory_repo
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r} (expected 'sql' or 'memory')")


def get_repo() -> ProdutoRepo:
    """
    Placeholder nadpisywany w create_app() przez dependency_overrides
    na wybrany provider (repo_provider).
    """
    raise RuntimeError("Repository provider not configured, use create_app()")


def get_service(repo: ProdutoRepo = Depends(get_repo)) -> ProdutoService:
    return ProdutoService(repo)
