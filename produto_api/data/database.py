# produto_api/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from produto_api.utils.settings import DATABASE_URL


def make_engine(url: str = DATABASE_URL, **kwargs) -> Engine:
    #sqlite + threadpool FastAPI -> polaczenie uzywane z roznych watkow
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True, **kwargs)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


Base = declarative_base()

engine = make_engine()
SessionLocal = make_session_factory(engine)
