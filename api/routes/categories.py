"""Food category routes"""

from fastapi import APIRouter, Depends

from api.dependencies import get_food_service
from api.responses import ERROR_RESPONSES
from domain.schemas.food_schemas import CategoryDetailResponse, CategoryListResponse
from services.food_service import FoodService

router = APIRouter(prefix="/api/categories", tags=["Food Catalogue"])


@router.get("", response_model=CategoryListResponse, responses=ERROR_RESPONSES)
def list_categories(service: FoodService = Depends(get_food_service)):
    """All food categories ordered by sort_order."""
    categories = service.list_categories()
    return CategoryListResponse(categories=categories, count=len(categories))


@router.get("/{category_id}", response_model=CategoryDetailResponse, responses=ERROR_RESPONSES)
def get_category(category_id: int, service: FoodService = Depends(get_food_service)):
    return CategoryDetailResponse(category=service.get_category(category_id))
