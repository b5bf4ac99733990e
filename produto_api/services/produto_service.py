# produto_api/services/produto_service.py
from typing import List

from produto_api.data.models.produto import ProdutoModel
from produto_api.domain.exceptions import (
    ConcurrencyConflictError,
    ProdutoIdMismatchError,
    ProdutoNotFoundError,
)
from produto_api.domain.schemas import ProdutoCreate, ProdutoUpdate
from produto_api.repos.produto_repo import ProdutoRepo
from produto_api.utils.logging import get_logger

logger = get_logger(__name__)


class ProdutoService:
    """
    Use case'y dla domeny produktu, kazdy to jedno przejscie
    request -> repo -> save_changes, bez stanu miedzy requestami
    """

    def __init__(self, repo: ProdutoRepo):
        self.repo = repo

    #query
    def list_produtos(self) -> List[ProdutoModel]:
        return self.repo.list_all()

    def get_produto(self, produto_id: int) -> ProdutoModel:
        produto = self.repo.get(produto_id)
        if not produto:
            raise ProdutoNotFoundError(produto_id)
        return produto

    #commands
    def create_produto(self, payload: ProdutoCreate) -> ProdutoModel:
        produto = ProdutoModel(name=payload.name, price=payload.price, version=1)

        self.repo.add(produto)
        self.repo.save_changes()

        logger.info(f"Created produto {produto.id} ({produto.name!r}, price={produto.price})")
        return produto

    def replace_produto(self, produto_id: int, payload: ProdutoUpdate) -> None:
        """
        Pelne nadpisanie name/price. Nie czytamy wiersza przed zapisem,
        update jest oznaczany jako zmodyfikowany i sprawdzany dopiero przy commit.
        """
        if payload.id != produto_id:
            raise ProdutoIdMismatchError(produto_id, payload.id)

        self.repo.update(
            ProdutoModel(
                id=produto_id,
                name=payload.name,
                price=payload.price,
                version=payload.version,
            )
        )

        try:
            self.repo.save_changes()
        except ConcurrencyConflictError:
            # konflikt: jesli wiersza juz nie ma to 404, inaczej konflikt idzie wyzej
            if not self.repo.exists(produto_id):
                logger.info(f"Produto {produto_id} disappeared before commit")
                raise ProdutoNotFoundError(produto_id)
            logger.warning(f"Concurrency conflict while replacing produto {produto_id}")
            raise

        logger.info(f"Replaced produto {produto_id}")

    def delete_produto(self, produto_id: int) -> None:
        produto = self.repo.get(produto_id)
        if not produto:
            raise ProdutoNotFoundError(produto_id)

        self.repo.remove(produto)
        try:
            self.repo.save_changes()
        except ConcurrencyConflictError:
            #ktos usunal go miedzy get a commit
            raise ProdutoNotFoundError(produto_id)

        logger.info(f"Deleted produto {produto_id}")
