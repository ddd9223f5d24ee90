from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Category(str, Enum):
    appetizer = "appetizer"
    entree = "entree"
    dessert = "dessert"
    beverage = "beverage"


class MenuItemPayload(BaseModel):
    """A validated create/replace body: every field except the id."""

    name: str = Field(..., min_length=3)
    description: str = Field(..., min_length=10)
    price: float = Field(..., gt=0)
    category: Category
    ingredients: list[str] = Field(..., min_length=1)
    available: bool = True


class MenuItem(BaseModel):
    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=3)
    description: str = Field(..., min_length=10)
    price: float = Field(..., gt=0)
    category: Category
    ingredients: list[str] = Field(..., min_length=1)
    available: bool = True

    @classmethod
    def from_payload(cls, item_id: int, payload: MenuItemPayload) -> MenuItem:
        return cls(id=item_id, **payload.model_dump())


class DeletedMenuItem(BaseModel):
    message: str = "Menu item deleted"
    deleted: MenuItem
