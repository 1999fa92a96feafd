"""
Domain schemas package - Pydantic models for responses and requests.
"""

from domain.schemas.template_schemas import (
    MealItemResponse,
    MealResponse,
    DayResponse,
    TemplateResponse,
    TemplateFullResponse,
)
from domain.schemas.food_schemas import (
    CategoryResponse,
    FoodResponse,
    CategoryListResponse,
    CategoryDetailResponse,
    FoodListResponse,
    FoodDetailResponse,
)
from domain.schemas.benchmark_schemas import (
    BulkInsertItem,
    BulkInsertRequest,
    BulkInsertResponse,
)

__all__ = [
    # Template schemas
    "MealItemResponse",
    "MealResponse",
    "DayResponse",
    "TemplateResponse",
    "TemplateFullResponse",
    # Food schemas
    "CategoryResponse",
    "FoodResponse",
    "CategoryListResponse",
    "CategoryDetailResponse",
    "FoodListResponse",
    "FoodDetailResponse",
    # Benchmark schemas
    "BulkInsertItem",
    "BulkInsertRequest",
    "BulkInsertResponse",
]
