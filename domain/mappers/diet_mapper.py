"""
Diet template mappers.
Turns ordered result rows into template, day, meal and meal item records.
"""

from typing import Any, Sequence

from domain.mappers.row_values import as_int, as_text
from domain.schemas.template_schemas import (
    DayResponse,
    MealItemResponse,
    MealResponse,
    TemplateResponse,
)

RowT = Sequence[Any]


class DietMapper:
    """Mapper for the template -> day -> meal -> item hierarchy."""

    @staticmethod
    def template_from_row(row: RowT) -> TemplateResponse:
        """
        Convert a diet_templates row to a TemplateResponse with no days.

        Args:
            row: (id, code, name, description, segment, type,
                  duration_days, calories_target)
        """
        return TemplateResponse(
            id=as_int(row[0]),
            code=as_text(row[1]),
            name=as_text(row[2]),
            description=as_text(row[3]),
            segment=as_text(row[4]),
            type=as_text(row[5]),
            duration_days=as_int(row[6]),
            calories_target=as_int(row[7]),
        )

    @staticmethod
    def day_from_row(row: RowT) -> DayResponse:
        """Row: (id, day_number, day_name)"""
        return DayResponse(
            id=as_int(row[0]),
            day_number=as_int(row[1]),
            day_name=as_text(row[2]),
        )

    @staticmethod
    def meal_from_row(row: RowT) -> MealResponse:
        """Row: (id, meal_type, meal_order, time_suggestion)"""
        return MealResponse(
            id=as_int(row[0]),
            meal_type=as_text(row[1]),
            meal_order=as_int(row[2]),
            time_suggestion=as_text(row[3]),
        )

    @staticmethod
    def item_from_row(row: RowT) -> MealItemResponse:
        """Row: (id, food_item_id, food_name, portion_grams_min, portion_grams_max)"""
        return MealItemResponse(
            id=as_int(row[0]),
            food_item_id=as_int(row[1]),
            food_name=as_text(row[2]),
            portion_grams_min=as_int(row[3]),
            portion_grams_max=as_int(row[4]),
        )
