"""Food item routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_food_service
from api.responses import ERROR_RESPONSES
from domain.schemas.food_schemas import FoodDetailResponse, FoodListResponse
from services.food_service import FoodService

router = APIRouter(prefix="/api/foods", tags=["Food Catalogue"])


@router.get("", response_model=FoodListResponse, responses=ERROR_RESPONSES)
def list_foods(
    category_id: Optional[int] = Query(None, description="Only foods of this category"),
    search: Optional[str] = Query(None, description="Substring of the food name"),
    limit: Optional[int] = Query(
        None, description="Maximum rows (default 100; values outside 1..1000 use the default)"
    ),
    service: FoodService = Depends(get_food_service),
):
    """
    List food items ordered by name, with optional category and name filters.
    Nutrition values are per 100g.
    """
    foods = service.list_foods(category_id=category_id, search=search, limit=limit)
    return FoodListResponse(foods=foods, count=len(foods))


@router.get("/{food_id}", response_model=FoodDetailResponse, responses=ERROR_RESPONSES)
def get_food(food_id: int, service: FoodService = Depends(get_food_service)):
    return FoodDetailResponse(food=service.get_food(food_id))
