from __future__ import annotations

from typing import List, Optional

from adapters.sql_adapter import Row
from repositories.base import BaseRepository


class DietRepository(BaseRepository):
    """
    Repository layer for the diet template hierarchy.
    Each method is one round trip; ordering is done by the store.
    """

    def get_template(self, template_id: int) -> Optional[Row]:
        """Row: (id, code, name, description, segment, type, duration_days, calories_target)"""
        sql = """
        SELECT id, code, name, description, segment, type, duration_days, calories_target
        FROM diet_templates
        WHERE id = :tid
        """
        return self.fetch_one(sql, {"tid": template_id})

    def list_days(self, template_id: int) -> List[Row]:
        """Row: (id, day_number, day_name), ordered by day_number"""
        sql = """
        SELECT id, day_number, day_name
        FROM diet_days
        WHERE template_id = :tid
        ORDER BY day_number
        """
        return self.fetch_all(sql, {"tid": template_id})

    def list_meals(self, day_id: int) -> List[Row]:
        """Row: (id, meal_type, meal_order, time_suggestion), ordered by meal_order"""
        sql = """
        SELECT id, meal_type, meal_order, time_suggestion
        FROM diet_meals
        WHERE day_id = :did
        ORDER BY meal_order
        """
        return self.fetch_all(sql, {"did": day_id})

    def list_meal_items(self, meal_id: int) -> List[Row]:
        """
        Row: (id, food_item_id, food_name, portion_grams_min, portion_grams_max),
        ordered by sort_order. The food name comes from the same round trip.
        """
        sql = """
        SELECT mi.id, mi.food_item_id, f.name, mi.portion_grams_min, mi.portion_grams_max
        FROM diet_meal_items mi
        JOIN food_items f ON mi.food_item_id = f.id
        WHERE mi.meal_id = :mid
        ORDER BY mi.sort_order
        """
        return self.fetch_all(sql, {"mid": meal_id})

    def insert_meal_item(
        self,
        meal_id: int,
        food_item_id: int,
        portion_grams_min: int,
        portion_grams_max: int,
        sort_order: int,
    ) -> int:
        """
        Insert one meal item and return the affected row count.

        Table: diet_meal_items(id pk, meal_id, food_item_id, portion_grams_min,
                               portion_grams_max, sort_order)
        """
        sql = """
        INSERT INTO diet_meal_items (meal_id, food_item_id, portion_grams_min, portion_grams_max, sort_order)
        VALUES (:mid, :fid, :pmin, :pmax, :sort)
        """
        return self.gate.execute(
            sql,
            {
                "mid": meal_id,
                "fid": food_item_id,
                "pmin": portion_grams_min,
                "pmax": portion_grams_max,
                "sort": sort_order,
            },
        )
