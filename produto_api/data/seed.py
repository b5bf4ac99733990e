# produto_api/data/seed.py
from decimal import Decimal

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from produto_api.data import database
from produto_api.data.database import Base, make_session_factory
from produto_api.data.models.produto import ProdutoModel
from produto_api.repos.produto_repo import SqlProdutoRepo
from produto_api.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_PRODUTOS = [
    {"name": "Keyboard", "price": Decimal("199.99")},
    {"name": "Mouse", "price": Decimal("49.50")},
    {"name": "Monitor", "price": Decimal("899.00")},
]


def seed_session(db: Session) -> int:
    repo = SqlProdutoRepo(db)

    # not forcing: only seed if empty
    if repo.list_all():
        logger.info("Produtos table not empty, skipping seed")
        return 0

    for data in SAMPLE_PRODUTOS:
        repo.add(ProdutoModel(name=data["name"], price=data["price"], version=1))
    count = repo.save_changes()

    logger.info(f"Seeded {count} produtos")
    return count


def seed(engine: Engine | None = None) -> int:
    engine = engine or database.engine

    #swieza baza (bez startu aplikacji) nie ma jeszcze tabeli
    Base.metadata.create_all(bind=engine)

    db = make_session_factory(engine)()
    try:
        return seed_session(db)
    finally:
        db.close()


if __name__ == "__main__":
    seed()
