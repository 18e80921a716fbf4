"""Food catalogue endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse

from ...errors import FoodCategoryNotFoundError
from ...schemas.food import FoodCategoryModel
from ...services.food import FoodCatalogue, FoodItemSelector, get_food_catalogue

router = APIRouter(prefix="/food", tags=["food"])


@router.get("", response_model=List[FoodCategoryModel], status_code=status.HTTP_200_OK)
def list_food_categories(catalogue: FoodCatalogue = Depends(get_food_catalogue)) -> List[FoodCategoryModel]:
    return [FoodCategoryModel.from_domain(category) for category in catalogue.list_categories()]


@router.get("/{category_id}", response_model=FoodCategoryModel, status_code=status.HTTP_200_OK)
def get_food_category(
    category_id: str,
    catalogue: FoodCatalogue = Depends(get_food_catalogue),
) -> FoodCategoryModel:
    try:
        return FoodCategoryModel.from_domain(catalogue.get_category(category_id))
    except FoodCategoryNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.get("/{category_id}/selector", response_class=HTMLResponse, status_code=status.HTTP_200_OK)
def render_food_item_selector(
    category_id: str,
    selected: List[str] = Query(default=[], description="Ids of the currently selected food items"),
    on_change: str = Query(default="handleItemsChange", alias="onChange", pattern=r"^[A-Za-z_$][\w$.]*$"),
    catalogue: FoodCatalogue = Depends(get_food_catalogue),
) -> HTMLResponse:
    """Render the item tiles of one category; an unknown category renders an empty selector."""

    selector = FoodItemSelector(catalogue.find_category)
    return HTMLResponse(selector.render(category_id, selected_items=selected, handle_items_change=on_change))
