"""Food catalogue persistence."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Iterable, Optional, Protocol

from supabase import Client

from ..db.supabase import get_supabase_client
from ..models.domain import FoodCategory, FoodItem

logger = logging.getLogger(__name__)

CATEGORY_TABLE = "food_categories"
ITEM_TABLE = "food_items"


class FoodRepository(Protocol):
    def list_categories(self) -> list[FoodCategory]:
        ...

    def get_category(self, category_id: str) -> Optional[FoodCategory]:
        ...


def _category_from_row(row: dict[str, Any], items: Iterable[dict[str, Any]]) -> FoodCategory:
    return FoodCategory(
        id=str(row["id"]),
        category=row["category"],
        items=[
            FoodItem(
                id=str(item["id"]),
                name=item["name"],
                category_id=str(row["id"]),
                quantity=item.get("quantity"),
            )
            for item in sorted(items, key=lambda item: item.get("position") or 0)
        ],
    )


class InMemoryFoodRepository:
    def __init__(self, categories: Iterable[FoodCategory] = ()) -> None:
        self._categories = {category.id: category for category in categories}

    def list_categories(self) -> list[FoodCategory]:
        return list(self._categories.values())

    def get_category(self, category_id: str) -> Optional[FoodCategory]:
        return self._categories.get(category_id)


class SupabaseFoodRepository:
    """Categories and their items read from the ``food_categories``/``food_items`` tables."""

    def __init__(self, client: Client) -> None:
        self.client = client

    def list_categories(self) -> list[FoodCategory]:
        categories = self.client.table(CATEGORY_TABLE).select("*").order("category").execute().data or []
        items = self.client.table(ITEM_TABLE).select("*").execute().data or []
        by_category: dict[str, list[dict[str, Any]]] = {}
        for item in items:
            by_category.setdefault(str(item["category_id"]), []).append(item)
        return [_category_from_row(row, by_category.get(str(row["id"]), [])) for row in categories]

    def get_category(self, category_id: str) -> Optional[FoodCategory]:
        rows = self.client.table(CATEGORY_TABLE).select("*").eq("id", category_id).limit(1).execute().data or []
        if not rows:
            return None
        items = self.client.table(ITEM_TABLE).select("*").eq("category_id", category_id).execute().data or []
        return _category_from_row(rows[0], items)


def sample_catalogue() -> tuple[FoodCategory, ...]:
    """Starter catalogue served when no database is configured."""

    def category(category_id: str, name: str, items: Iterable[str]) -> FoodCategory:
        return FoodCategory(
            id=category_id,
            category=name,
            items=[
                FoodItem(id=f"{category_id}-{index}", name=item, category_id=category_id)
                for index, item in enumerate(items, start=1)
            ],
        )

    return (
        category("grains", "Grains", ["Rice", "Pasta", "Oats", "Bread"]),
        category("canned", "Canned Goods", ["Beans", "Tuna", "Tomatoes", "Soup", "Corn"]),
        category("dairy", "Dairy", ["Milk", "Cheese", "Yogurt"]),
        category("produce", "Produce", ["Apples", "Potatoes", "Carrots", "Onions"]),
    )


@lru_cache(maxsize=1)
def get_food_repository() -> FoodRepository:
    client = get_supabase_client()
    if not client:
        logger.warning("Supabase not configured - serving the sample food catalogue")
        return InMemoryFoodRepository(sample_catalogue())
    return SupabaseFoodRepository(client)
