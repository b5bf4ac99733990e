#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from produto_api.data.models.produto import ProdutoModel

__all__ = ["ProdutoModel"]
