"""
Food Repository - Data access layer for food categories and food items
"""

from typing import Any, Dict, List, Optional

from adapters.sql_adapter import Row
from repositories.base import BaseRepository


class FoodRepository(BaseRepository):
    """Repository for the food catalogue"""

    def list_categories(self) -> List[Row]:
        """Get all categories ordered by sort_order"""
        return self.fetch_all(
            "SELECT id, name, icon, color, sort_order "
            "FROM food_categories ORDER BY sort_order"
        )

    def get_category(self, category_id: int) -> Optional[Row]:
        """Get category by ID"""
        return self.fetch_one(
            "SELECT id, name, icon, color, sort_order "
            "FROM food_categories WHERE id = :cid",
            {"cid": category_id},
        )

    def list_foods(
        self,
        category_id: Optional[int] = None,
        search: Optional[str] = None,
        limit: int = 100,
    ) -> List[Row]:
        """
        Get food items ordered by name.

        Args:
            category_id: only foods of this category
            search: substring of the food name; bound as a LIKE parameter
            limit: maximum number of rows
        """
        clauses: List[str] = []
        params: Dict[str, Any] = {"lim": limit}
        if category_id is not None:
            clauses.append("category_id = :cid")
            params["cid"] = category_id
        if search:
            clauses.append("name LIKE :pattern")
            params["pattern"] = f"%{search}%"

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""
        sql = (
            "SELECT id, name, category_id, calories_per_100g, protein_per_100g, "
            f"carbs_per_100g, fat_per_100g FROM food_items{where} "
            "ORDER BY name LIMIT :lim"
        )
        return self.fetch_all(sql, params)

    def get_food(self, food_id: int) -> Optional[Row]:
        """Get food item by ID"""
        return self.fetch_one(
            "SELECT id, name, category_id, calories_per_100g, protein_per_100g, "
            "carbs_per_100g, fat_per_100g FROM food_items WHERE id = :fid",
            {"fid": food_id},
        )
