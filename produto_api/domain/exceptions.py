# produto_api/domain/exceptions.py


class ProdutoError(Exception):
    """Base error for the produto domain."""


class ProdutoNotFoundError(ProdutoError):
    def __init__(self, produto_id: int):
        self.produto_id = produto_id
        super().__init__(f"Produto {produto_id} not found")


class ProdutoIdMismatchError(ProdutoError):
    def __init__(self, route_id: int, body_id: int):
        self.route_id = route_id
        self.body_id = body_id
        super().__init__(f"Route id {route_id} does not match body id {body_id}")


class ConcurrencyConflictError(ProdutoError):
    """
    Raised by save_changes() when a staged update/remove matched 0 rows:
    the row was deleted or its version moved on since it was read.
    """

    def __init__(self, produto_id: int, message: str | None = None):
        self.produto_id = produto_id
        super().__init__(
            message or f"Produto {produto_id} was modified or deleted by another operation"
        )
