# produto_api/repos/produto_repo.py
import threading
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, List, Tuple

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from produto_api.data.models.produto import ProdutoModel
from produto_api.domain.exceptions import ConcurrencyConflictError
from produto_api.utils.logging import get_logger

logger = get_logger(__name__)

_ADD = "add"
_UPDATE = "update"
_REMOVE = "remove"


class ProdutoRepo(ABC):
    """
    Kontekst bazy dla produktow:
    - widok kolekcji (list_all, get, exists)
    - add / update / remove tylko zapisuja zmiany w kolejce
    - save_changes wysyla wszystko jako jedna jednostke
    """

    def __init__(self):
        self._pending: List[Tuple[str, ProdutoModel]] = []

    #query
    @abstractmethod
    def list_all(self) -> List[ProdutoModel]:
        ...

    @abstractmethod
    def get(self, produto_id: int) -> ProdutoModel | None:
        ...

    def exists(self, produto_id: int) -> bool:
        return self.get(produto_id) is not None

    #commands - tylko kolejkowanie
    def add(self, produto: ProdutoModel) -> None:
        self._pending.append((_ADD, produto))

    def update(self, produto: ProdutoModel) -> None:
        self._pending.append((_UPDATE, produto))

    def remove(self, produto: ProdutoModel) -> None:
        self._pending.append((_REMOVE, produto))

    @property
    def has_changes(self) -> bool:
        return bool(self._pending)

    def rollback(self) -> None:
        self._pending.clear()

    @abstractmethod
    def save_changes(self) -> int:
        """
        Flush all staged changes as one unit and return the number of
        affected rows. Raises ConcurrencyConflictError (and keeps nothing)
        when a staged update/remove matched no row.
        """


class SqlProdutoRepo(ProdutoRepo):
    def __init__(self, db: Session):
        super().__init__()
        self.db = db

    def list_all(self) -> List[ProdutoModel]:
        return list(self.db.execute(select(ProdutoModel).order_by(ProdutoModel.id)).scalars().all())

    def get(self, produto_id: int) -> ProdutoModel | None:
        return self.db.get(ProdutoModel, produto_id)

    def save_changes(self) -> int:
        if not self._pending:
            return 0

        affected = 0
        try:
            for op, produto in self._pending:
                if op == _ADD:
                    self.db.add(produto)
                    affected += 1
                elif op == _UPDATE:
                    affected += self._execute_update(produto)
                elif op == _REMOVE:
                    affected += self._execute_remove(produto)

            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        finally:
            self._pending.clear()

        logger.debug(f"save_changes: {affected} row(s) affected")
        return affected

    def _execute_update(self, produto: ProdutoModel) -> int:
        # Optimistic locking
        # update produtos set ..., version = version + 1 where id = 1 [and version = 3]
        stmt = update(ProdutoModel).where(ProdutoModel.id == produto.id)
        if produto.version is not None:
            stmt = stmt.where(ProdutoModel.version == produto.version)

        stmt = stmt.values(
            name=produto.name,
            price=produto.price,
            version=ProdutoModel.version + 1,
        ).execution_options(synchronize_session=False)

        rowcount = self.db.execute(stmt).rowcount
        if rowcount == 0:
            raise ConcurrencyConflictError(produto.id)

        #obiekt w identity map moglby miec stare dane
        self.db.expire_all()
        return rowcount

    def _execute_remove(self, produto: ProdutoModel) -> int:
        rowcount = self.db.execute(
            delete(ProdutoModel)
            .where(ProdutoModel.id == produto.id)
            .execution_options(synchronize_session=False)
        ).rowcount

        if rowcount == 0:
            raise ConcurrencyConflictError(produto.id)

        if produto in self.db:
            self.db.expunge(produto)
        return rowcount


class InMemoryStore:
    """
    Wspoldzielony (na caly proces) magazyn wierszy dla backendu memory.
    Zmiany aplikowane atomowo pod lockiem.
    """

    def __init__(self):
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def snapshot(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(self._rows[k]) for k in sorted(self._rows)]

    def find(self, produto_id: int) -> Dict[str, Any] | None:
        with self._lock:
            row = self._rows.get(produto_id)
            return dict(row) if row else None

    def apply(self, ops: List[Tuple[str, ProdutoModel]]) -> int:
        with self._lock:
            #pracujemy na kopii, przy konflikcie nic nie zostaje zapisane
            rows = {k: dict(v) for k, v in self._rows.items()}
            next_id = self._next_id
            assigned: List[Tuple[ProdutoModel, int]] = []
            affected = 0

            for op, produto in ops:
                if op == _ADD:
                    rows[next_id] = {
                        "id": next_id,
                        "name": produto.name,
                        "price": Decimal(str(produto.price)),
                        "version": 1,
                    }
                    assigned.append((produto, next_id))
                    next_id += 1
                elif op == _UPDATE:
                    row = rows.get(produto.id)
                    if row is None or (produto.version is not None and row["version"] != produto.version):
                        raise ConcurrencyConflictError(produto.id)
                    row["name"] = produto.name
                    row["price"] = Decimal(str(produto.price))
                    row["version"] += 1
                elif op == _REMOVE:
                    if rows.pop(produto.id, None) is None:
                        raise ConcurrencyConflictError(produto.id)
                affected += 1

            self._rows = rows
            self._next_id = next_id

        for produto, new_id in assigned:
            produto.id = new_id
            produto.version = 1
        return affected

    def clear(self) -> None:
        with self._lock:
            self._rows.clear()
            self._next_id = 1


class InMemoryProdutoRepo(ProdutoRepo):
    def __init__(self, store: InMemoryStore):
        super().__init__()
        self.store = store

    @staticmethod
    def _to_model(row: Dict[str, Any]) -> ProdutoModel:
        return ProdutoModel(id=row["id"], name=row["name"], price=row["price"], version=row["version"])

    def list_all(self) -> List[ProdutoModel]:
        return [self._to_model(r) for r in self.store.snapshot()]

    def get(self, produto_id: int) -> ProdutoModel | None:
        row = self.store.find(produto_id)
        return self._to_model(row) if row else None

    def save_changes(self) -> int:
        if not self._pending:
            return 0
        try:
            affected = self.store.apply(self._pending)
        finally:
            self._pending.clear()

        logger.debug(f"save_changes (memory): {affected} row(s) affected")
        return affected
