# produto_api/api/routers/produtos.py
from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from produto_api.api.dependencies import get_service
from produto_api.domain.exceptions import (
    ConcurrencyConflictError,
    ProdutoIdMismatchError,
    ProdutoNotFoundError,
)
from produto_api.domain.schemas import MAX_PRODUTO_ID, ProdutoCreate, ProdutoOut, ProdutoUpdate
from produto_api.services.produto_service import ProdutoService

router = APIRouter(prefix="/api/produto", tags=["produto"])

#id poza zakresem kolumny to 422, zanim dotknie bazy
ProdutoId = Annotated[int, Path(gt=0, le=MAX_PRODUTO_ID)]


@router.get("", response_model=List[ProdutoOut])
def list_produtos(svc: ProdutoService = Depends(get_service)):
    return svc.list_produtos()


@router.get("/{produto_id}", response_model=ProdutoOut)
def get_produto(produto_id: ProdutoId, svc: ProdutoService = Depends(get_service)):
    try:
        return svc.get_produto(produto_id)
    except ProdutoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=ProdutoOut, status_code=status.HTTP_201_CREATED)
def create_produto(
    payload: ProdutoCreate,
    request: Request,
    response: Response,
    svc: ProdutoService = Depends(get_service),
):
    created = svc.create_produto(payload)
    response.headers["Location"] = str(request.url_for("get_produto", produto_id=created.id).path)
    return created


@router.put("/{produto_id}", status_code=status.HTTP_204_NO_CONTENT)
def replace_produto(
    produto_id: ProdutoId,
    payload: ProdutoUpdate,
    svc: ProdutoService = Depends(get_service),
):
    try:
        svc.replace_produto(produto_id, payload)
    except ProdutoIdMismatchError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProdutoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConcurrencyConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{produto_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_produto(produto_id: ProdutoId, svc: ProdutoService = Depends(get_service)):
    try:
        svc.delete_produto(produto_id)
    except ProdutoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
