"""Food catalogue lookups."""

from __future__ import annotations

from ...errors import FoodCategoryNotFoundError
from ...models.domain import FoodCategory, FoodItem
from ...persistence.food import FoodRepository


class FoodCatalogue:
    def __init__(self, repository: FoodRepository) -> None:
        self.repository = repository

    def list_categories(self) -> list[FoodCategory]:
        return self.repository.list_categories()

    def find_category(self, category_id: str) -> FoodCategory | None:
        return self.repository.get_category(category_id)

    def get_category(self, category_id: str) -> FoodCategory:
        category = self.find_category(category_id)
        if category is None:
            raise FoodCategoryNotFoundError(category_id)
        return category

    def items_for_category(self, category_id: str) -> list[FoodItem]:
        return list(self.get_category(category_id).items)
