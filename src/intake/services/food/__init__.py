"""Food catalogue and item selector."""

from functools import lru_cache

from ...persistence.food import get_food_repository
from .catalogue import FoodCatalogue
from .selector import FoodItemSelector, template_environment


@lru_cache(maxsize=1)
def get_food_catalogue() -> FoodCatalogue:
    return FoodCatalogue(get_food_repository())


__all__ = ["FoodCatalogue", "FoodItemSelector", "get_food_catalogue", "template_environment"]
