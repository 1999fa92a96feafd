from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class MealItemResponse(BaseModel):
    """Food portion inside a meal, with the food name joined in"""

    id: int
    food_item_id: int
    food_name: str
    portion_grams_min: int
    portion_grams_max: int


class MealResponse(BaseModel):
    id: int
    meal_type: str
    meal_order: int
    time_suggestion: str
    items: List[MealItemResponse] = Field(default_factory=list)


class DayResponse(BaseModel):
    id: int
    day_number: int
    day_name: str
    meals: List[MealResponse] = Field(default_factory=list)


class TemplateResponse(BaseModel):
    """Diet template with its full day/meal/item tree"""

    id: int
    code: str
    name: str
    description: str
    segment: str
    type: str
    duration_days: int
    calories_target: int
    days: List[DayResponse] = Field(default_factory=list)


class TemplateFullResponse(BaseModel):
    success: bool = True
    template: TemplateResponse
