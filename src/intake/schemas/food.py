"""Pydantic response models for the food catalogue."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from ..models.domain import FoodCategory


class FoodItemModel(BaseModel):
    id: str
    name: str
    categoryId: Optional[str] = None
    quantity: Optional[int] = None


class FoodCategoryModel(BaseModel):
    id: str
    category: str
    items: List[FoodItemModel]

    @classmethod
    def from_domain(cls, category: FoodCategory) -> "FoodCategoryModel":
        return cls(
            id=category.id,
            category=category.category,
            items=[
                FoodItemModel(id=item.id, name=item.name, categoryId=item.category_id, quantity=item.quantity)
                for item in category.items
            ],
        )
