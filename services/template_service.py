from __future__ import annotations

import logging
from typing import List

from adapters.sql_adapter import QueryGate
from app.exceptions import DatabaseError, NotFoundError
from domain.mappers import DietMapper
from domain.schemas.template_schemas import MealItemResponse, MealResponse, TemplateResponse
from repositories.diet_repository import DietRepository

logger = logging.getLogger("dietapi.templates")

# Fan-out bounds for the full template view. Children past the bound are
# dropped without an error.
MAX_TEMPLATE_DAYS = 100
MAX_DAY_MEALS = 50


class TemplateService:
    """
    Builds the nested template document from four dependent queries:
    - the template row: missing -> NotFoundError, store failure -> DatabaseError
    - its days ordered by day_number: store failure -> DatabaseError
    - meals of each day ordered by meal_order
    - items of each meal ordered by sort_order, food name joined in

    The first two decide whether the template exists at all, so they fail the
    whole request. Meal and item lookups only affect completeness: a failure
    there leaves that day or meal with an empty list and the rest of the tree
    is still returned.

    Each query takes the gate lock on its own; other requests interleave
    between steps, so the result is not a snapshot.
    """

    def __init__(
        self,
        gate: QueryGate,
        max_days: int = MAX_TEMPLATE_DAYS,
        max_meals: int = MAX_DAY_MEALS,
    ):
        self.repo = DietRepository(gate)
        self.max_days = max_days
        self.max_meals = max_meals

    def get_template_full(self, template_id: int) -> TemplateResponse:
        row = self.repo.get_template(template_id)
        if row is None:
            raise NotFoundError("Template not found", details={"template_id": template_id})
        template = DietMapper.template_from_row(row)

        day_rows = self.repo.list_days(template_id)
        if len(day_rows) > self.max_days:
            logger.debug(
                "Template %d has %d days, keeping the first %d",
                template_id,
                len(day_rows),
                self.max_days,
            )
        template.days = [DietMapper.day_from_row(r) for r in day_rows[: self.max_days]]

        for day in template.days:
            day.meals = self._load_meals(day.id)

        logger.info("Assembled template %d with %d days", template_id, len(template.days))
        return template

    def _load_meals(self, day_id: int) -> List[MealResponse]:
        try:
            rows = self.repo.list_meals(day_id)
        except DatabaseError as exc:
            logger.warning("Meals for day %d unavailable, leaving it empty: %s", day_id, exc)
            return []

        if len(rows) > self.max_meals:
            logger.debug("Day %d has %d meals, keeping the first %d", day_id, len(rows), self.max_meals)
        meals = [DietMapper.meal_from_row(r) for r in rows[: self.max_meals]]
        for meal in meals:
            meal.items = self._load_items(meal.id)
        return meals

    def _load_items(self, meal_id: int) -> List[MealItemResponse]:
        try:
            rows = self.repo.list_meal_items(meal_id)
        except DatabaseError as exc:
            logger.warning("Items for meal %d unavailable, leaving it empty: %s", meal_id, exc)
            return []
        return [DietMapper.item_from_row(r) for r in rows]
