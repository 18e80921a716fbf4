"""Server-rendered food item selector."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ...models.domain import FoodCategory, FoodItem

TEMPLATE_DIR = Path(__file__).resolve().parents[2] / "templates"

_UNSET = object()


@lru_cache(maxsize=4)
def template_environment(template_dir: Path | None = None) -> Environment:
    return Environment(
        loader=FileSystemLoader(template_dir or TEMPLATE_DIR),
        autoescape=select_autoescape(["html"]),
    )


class FoodItemSelector:
    """Renders one selectable tile per item of the selected food category.

    The selector holds no selection state: selected ids and the change
    handler name come from the caller on every render. The item list is
    only looked up again when the selected category changes.
    """

    def __init__(
        self,
        get_food_category: Callable[[str], Optional[FoodCategory]],
        *,
        environment: Environment | None = None,
        template_name: str = "food_item_selector.html",
    ) -> None:
        self.get_food_category = get_food_category
        self.env = environment or template_environment()
        self.name = template_name
        self._category_id: object = _UNSET
        self._items: list[FoodItem] = []

    def items_for(self, selected_category_id: Optional[str]) -> list[FoodItem]:
        if selected_category_id != self._category_id:
            category = self.get_food_category(selected_category_id) if selected_category_id else None
            self._items = list(category.items) if category else []
            self._category_id = selected_category_id
        return self._items

    def render(
        self,
        selected_category_id: Optional[str],
        selected_items: Iterable[str] = (),
        handle_items_change: str = "handleItemsChange",
    ) -> str:
        return self.env.get_template(self.name).render(
            category_id=selected_category_id,
            items=self.items_for(selected_category_id),
            selected=set(selected_items),
            handler=handle_items_change,
        )
