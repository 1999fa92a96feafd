"""
Row mapper tests: field order, type coercion and the null policy
(null text -> "", null number -> 0).
"""

from datetime import time
from decimal import Decimal

from domain.mappers import DietMapper, FoodMapper
from domain.mappers.row_values import as_float, as_int, as_text


def test_template_row_maps_in_column_order():
    template = DietMapper.template_from_row(
        (7, "WL-1500", "Weight loss", "Low calorie", "adult", "weight_loss", 14, 1500)
    )

    assert template.model_dump() == {
        "id": 7,
        "code": "WL-1500",
        "name": "Weight loss",
        "description": "Low calorie",
        "segment": "adult",
        "type": "weight_loss",
        "duration_days": 14,
        "calories_target": 1500,
        "days": [],
    }


def test_template_row_nulls_become_empty_and_zero():
    template = DietMapper.template_from_row((3, None, None, None, None, None, None, None))

    assert template.code == ""
    assert template.name == ""
    assert template.description == ""
    assert template.segment == ""
    assert template.type == ""
    assert template.duration_days == 0
    assert template.calories_target == 0


def test_day_and_meal_rows():
    day = DietMapper.day_from_row((11, 1, None))
    meal = DietMapper.meal_from_row((101, "breakfast", None, time(8, 30)))

    assert (day.id, day.day_number, day.day_name, day.meals) == (11, 1, "", [])
    assert meal.meal_order == 0
    assert meal.time_suggestion == "08:30:00"
    assert meal.items == []


def test_item_row_truncates_numeric_portions():
    item = DietMapper.item_from_row((1001, 5, "Oatmeal", Decimal("40.9"), 60.0))

    assert item.portion_grams_min == 40
    assert item.portion_grams_max == 60
    assert item.food_name == "Oatmeal"


def test_item_row_does_not_reorder_min_and_max():
    """min > max is passed through untouched"""
    item = DietMapper.item_from_row((1, 2, "Rice", 200, 100))

    assert (item.portion_grams_min, item.portion_grams_max) == (200, 100)


def test_food_row_nutrition_as_float():
    food = FoodMapper.food_from_row((3, "Chicken breast", 2, Decimal("165.00"), "31.0", None, 3.6))

    assert food.calories == 165.0
    assert food.protein == 31.0
    assert food.carbs == 0.0
    assert food.fat == 3.6
    assert food.category_id == 2


def test_category_row_nulls():
    category = FoodMapper.category_from_row((1, "Dairy", None, None, None))

    assert category.model_dump() == {
        "id": 1,
        "name": "Dairy",
        "icon": "",
        "color": "",
        "sort_order": 0,
    }


def test_value_helpers():
    assert as_text(None) == ""
    assert as_text(12) == "12"
    assert as_int(None) == 0
    assert as_int("42") == 42
    assert as_int("12.7") == 12
    assert as_int("") == 0
    assert as_float(None) == 0.0
    assert as_float(Decimal("2.5")) == 2.5


def test_unparseable_numbers_read_as_zero():
    assert as_int("n/a") == 0
    assert as_int(float("inf")) == 0
    assert as_float("abc") == 0.0

    item = DietMapper.item_from_row((5, 1, "Rice", "about 40", "60"))
    assert (item.portion_grams_min, item.portion_grams_max) == (0, 60)
