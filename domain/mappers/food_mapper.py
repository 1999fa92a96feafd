"""
Food catalogue mappers.
"""

from typing import Any, Sequence

from domain.mappers.row_values import as_float, as_int, as_text
from domain.schemas.food_schemas import CategoryResponse, FoodResponse


class FoodMapper:
    """Mapper for food categories and food items."""

    @staticmethod
    def category_from_row(row: Sequence[Any]) -> CategoryResponse:
        """Row: (id, name, icon, color, sort_order)"""
        return CategoryResponse(
            id=as_int(row[0]),
            name=as_text(row[1]),
            icon=as_text(row[2]),
            color=as_text(row[3]),
            sort_order=as_int(row[4]),
        )

    @staticmethod
    def food_from_row(row: Sequence[Any]) -> FoodResponse:
        """Row: (id, name, category_id, calories, protein, carbs, fat), nutrition per 100g"""
        return FoodResponse(
            id=as_int(row[0]),
            name=as_text(row[1]),
            category_id=as_int(row[2]),
            calories=as_float(row[3]),
            protein=as_float(row[4]),
            carbs=as_float(row[5]),
            fat=as_float(row[6]),
        )
