# produto_api/domain/schemas.py
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

#zakres kolumny Integer (id produktu)
MAX_PRODUTO_ID = 2**31 - 1


class ProdutoCreate(BaseModel):
    """Schema dla tworzenia produktu."""

    name: str = Field(..., min_length=1, max_length=200, description="Nazwa produktu")
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Cena (>= 0)")


class ProdutoUpdate(BaseModel):
    """Schema dla PUT - pelne nadpisanie, id musi zgadzac sie z trasa."""

    id: int = Field(..., gt=0, le=MAX_PRODUTO_ID, description="ID produktu (musi byc rowne id w URL)")
    name: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    version: int | None = Field(
        default=None,
        gt=0,
        description="Oczekiwana wersja; gdy podana, update tylko jesli wersja w bazie sie zgadza",
    )


class ProdutoOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str
    price: Decimal
    version: int

    model_config = ConfigDict(from_attributes=True)

    #w JSON cena jako liczba, nie string
    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)


class HealthOut(BaseModel):
    status: str
    database: str
