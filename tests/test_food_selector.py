import pytest

from intake.errors import FoodCategoryNotFoundError
from intake.models.domain import FoodCategory, FoodItem
from intake.persistence.food import InMemoryFoodRepository, sample_catalogue
from intake.services.food import FoodCatalogue, FoodItemSelector


def _category(category_id: str, *names: str) -> FoodCategory:
    return FoodCategory(
        id=category_id,
        category=category_id.title(),
        items=[FoodItem(id=f"{category_id}-{name.lower()}", name=name, category_id=category_id) for name in names],
    )


class CountingLookup:
    def __init__(self, categories):
        self.categories = {category.id: category for category in categories}
        self.calls: list[str] = []

    def __call__(self, category_id):
        self.calls.append(category_id)
        return self.categories.get(category_id)


def test_empty_category_renders_container_without_tiles():
    selector = FoodItemSelector(CountingLookup([_category("empty")]))

    html = selector.render("empty")

    assert 'class="list-group food-item-selector"' in html
    assert "height: 225px; overflow-y: auto" in html
    assert "flex-wrap: wrap" in html
    assert "data-item-id" not in html


def test_unknown_category_renders_no_tiles():
    html = FoodItemSelector(CountingLookup([])).render("missing")

    assert "data-item-id" not in html


def test_tiles_follow_item_order_and_mark_selection():
    selector = FoodItemSelector(CountingLookup([_category("grains", "Rice", "Pasta", "Oats")]))

    html = selector.render("grains", selected_items=["grains-pasta"], handle_items_change="onPick")

    assert html.index("Rice") < html.index("Pasta") < html.index("Oats")
    assert html.count("data-item-id=") == 3
    assert html.count('aria-pressed="true"') == 1
    assert 'class="list-group-item foodItem active"' in html
    assert 'data-on-change="onPick"' in html


def test_items_recomputed_only_when_category_changes():
    lookup = CountingLookup([_category("grains", "Rice", "Pasta"), _category("dairy", "Milk")])
    selector = FoodItemSelector(lookup)

    assert [item.name for item in selector.items_for("grains")] == ["Rice", "Pasta"]
    selector.render("grains", selected_items=["grains-rice"])
    assert lookup.calls == ["grains"]

    html = selector.render("dairy")
    assert [item.name for item in selector.items_for("dairy")] == ["Milk"]
    assert "Milk" in html
    assert "Rice" not in html and "Pasta" not in html
    assert lookup.calls == ["grains", "dairy"]


def test_item_names_are_escaped():
    selector = FoodItemSelector(CountingLookup([_category("snacks", "<b>Chips</b>")]))

    assert "&lt;b&gt;Chips&lt;/b&gt;" in selector.render("snacks")


def test_catalogue_lookups():
    catalogue = FoodCatalogue(InMemoryFoodRepository(sample_catalogue()))

    assert [category.id for category in catalogue.list_categories()] == ["grains", "canned", "dairy", "produce"]
    assert [item.name for item in catalogue.items_for_category("dairy")] == ["Milk", "Cheese", "Yogurt"]
    assert catalogue.find_category("bakery") is None
    with pytest.raises(FoodCategoryNotFoundError):
        catalogue.get_category("bakery")
