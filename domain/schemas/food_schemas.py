from pydantic import BaseModel, Field
from typing import List


class CategoryResponse(BaseModel):
    """Food category"""

    id: int
    name: str
    icon: str
    color: str
    sort_order: int


class FoodResponse(BaseModel):
    """Food item with nutrition values per 100g"""

    id: int
    name: str
    category_id: int
    calories: float
    protein: float
    carbs: float
    fat: float


class CategoryListResponse(BaseModel):
    success: bool = True
    categories: List[CategoryResponse] = Field(default_factory=list)
    count: int = 0


class CategoryDetailResponse(BaseModel):
    success: bool = True
    category: CategoryResponse


class FoodListResponse(BaseModel):
    success: bool = True
    foods: List[FoodResponse] = Field(default_factory=list)
    count: int = 0


class FoodDetailResponse(BaseModel):
    success: bool = True
    food: FoodResponse
