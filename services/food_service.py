"""Food catalogue lookups: one query each, flat results"""

import logging
from typing import List, Optional

from adapters.sql_adapter import QueryGate
from app.exceptions import NotFoundError
from domain.mappers import FoodMapper
from domain.schemas.food_schemas import CategoryResponse, FoodResponse
from repositories.food_repository import FoodRepository

logger = logging.getLogger("dietapi.foods")

DEFAULT_FOODS_LIMIT = 100
MAX_FOODS_LIMIT = 1000


class FoodService:
    def __init__(
        self,
        gate: QueryGate,
        default_limit: int = DEFAULT_FOODS_LIMIT,
        max_limit: int = MAX_FOODS_LIMIT,
    ):
        self.repo = FoodRepository(gate)
        self.default_limit = default_limit
        self.max_limit = max_limit

    def list_categories(self) -> List[CategoryResponse]:
        return [FoodMapper.category_from_row(r) for r in self.repo.list_categories()]

    def get_category(self, category_id: int) -> CategoryResponse:
        row = self.repo.get_category(category_id)
        if row is None:
            raise NotFoundError("Category not found", details={"category_id": category_id})
        return FoodMapper.category_from_row(row)

    def effective_limit(self, limit: Optional[int]) -> int:
        """Out-of-range limits fall back to the default instead of being clamped"""
        if limit is None or limit <= 0 or limit > self.max_limit:
            return self.default_limit
        return limit

    def list_foods(
        self,
        category_id: Optional[int] = None,
        search: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[FoodResponse]:
        rows = self.repo.list_foods(
            category_id=category_id,
            search=search or None,
            limit=self.effective_limit(limit),
        )
        logger.debug("Food listing returned %d rows", len(rows))
        return [FoodMapper.food_from_row(r) for r in rows]

    def get_food(self, food_id: int) -> FoodResponse:
        row = self.repo.get_food(food_id)
        if row is None:
            raise NotFoundError("Food not found", details={"food_id": food_id})
        return FoodMapper.food_from_row(row)
