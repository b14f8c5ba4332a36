from pydantic import BaseModel
from typing import List


class CartItem(BaseModel):
    product_id: str
    quantity: int


class ReplaceCartSchema(BaseModel):
    products: List[CartItem]


class UpdateQuantitySchema(BaseModel):
    # zero and negative values are stored as sent
    quantity: int


__all__ = ["CartItem", "ReplaceCartSchema", "UpdateQuantitySchema"]
