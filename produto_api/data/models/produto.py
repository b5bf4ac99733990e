# produto_api/data/models/produto.py
from sqlalchemy import Column, Integer, String, Numeric

from produto_api.data.database import Base


class ProdutoModel(Base):
    __tablename__ = "produtos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    #token optimistic locking, podbijany przy kazdym update
    version = Column(Integer, nullable=False, default=1)

    def __repr__(self) -> str:
        return f"<ProdutoModel id={self.id} name={self.name!r} price={self.price} v{self.version}>"
