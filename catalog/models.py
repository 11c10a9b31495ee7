# catalog/models.py
from pydantic import BaseModel, ConfigDict, Field


class ProductIn(BaseModel):
    """Request body for create and update.

    Missing fields fall back to zero values so presence checks happen in the
    handlers rather than as schema errors. Values of the wrong JSON type are
    rejected, not coerced; an int is still a valid price. Unknown keys, ``id``
    included, are dropped.
    """
    model_config = ConfigDict(populate_by_name=True, strict=True)

    name: str = ""
    price: float = Field(default=0.0, allow_inf_nan=False)
    category: str = ""
    in_stock: bool = Field(default=False, alias="inStock")


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    price: float
    category: str
    in_stock: bool = Field(alias="inStock")

    @classmethod
    def from_input(cls, product_id: str, payload: ProductIn) -> "Product":
        return cls(
            id=product_id,
            name=payload.name,
            price=payload.price,
            category=payload.category,
            in_stock=payload.in_stock,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
