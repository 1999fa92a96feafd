from __future__ import annotations

import json
import logging
import math
from typing import Any, Optional, Sequence

from adapters.sql_adapter import QueryGate
from app.exceptions import DatabaseError, ServiceValidationError
from domain.schemas.benchmark_schemas import BulkInsertItem, BulkInsertRequest
from repositories.diet_repository import DietRepository

logger = logging.getLogger("dietapi.benchmark")

ITEM_NUMERIC_FIELDS = ("food_item_id", "portion_grams_min", "portion_grams_max")


def _is_number(value: Any) -> bool:
    """JSON number check: booleans and non-finite floats do not count"""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


class BenchmarkService:
    """
    Bulk insert of meal items, used to measure write throughput.

    The payload shape is checked before any database access. After that every
    item stands on its own: malformed items are skipped, rows the store
    rejects are not counted, and the loop always runs to the end. Rows are
    committed one by one, so a batch can end up partially inserted.
    """

    def __init__(self, gate: QueryGate):
        self.repo = DietRepository(gate)

    @staticmethod
    def parse_request(body: Optional[bytes]) -> BulkInsertRequest:
        """
        Parse a raw request body.

        Raises:
            ServiceValidationError: "Missing request body", "Invalid JSON" or
                "Invalid request format" (meal_id not a number or items not a list)
        """
        if not body:
            raise ServiceValidationError("Missing request body", code="MISSING_BODY")

        try:
            payload = json.loads(body)
        except ValueError:
            raise ServiceValidationError("Invalid JSON", code="INVALID_JSON")

        if (
            not isinstance(payload, dict)
            or not _is_number(payload.get("meal_id"))
            or not isinstance(payload.get("items"), list)
        ):
            raise ServiceValidationError("Invalid request format", code="INVALID_FORMAT")

        return BulkInsertRequest(meal_id=int(payload["meal_id"]), items=payload["items"])

    @staticmethod
    def validate_item(item: Any, position: int) -> Optional[BulkInsertItem]:
        """Return the item as a row to insert, or None if it has the wrong shape"""
        if not isinstance(item, dict):
            return None
        if not all(_is_number(item.get(field)) for field in ITEM_NUMERIC_FIELDS):
            return None

        sort_order = item.get("sort_order")
        return BulkInsertItem(
            food_item_id=int(item["food_item_id"]),
            portion_grams_min=int(item["portion_grams_min"]),
            portion_grams_max=int(item["portion_grams_max"]),
            sort_order=int(sort_order) if _is_number(sort_order) else position,
        )

    def bulk_insert(self, meal_id: int, items: Sequence[Any]) -> int:
        """Insert every well-formed item for meal_id and return how many rows went in"""
        inserted = skipped = failed = 0

        for position, raw in enumerate(items):
            item = self.validate_item(raw, position)
            if item is None:
                skipped += 1
                continue
            try:
                self.repo.insert_meal_item(
                    meal_id,
                    item.food_item_id,
                    item.portion_grams_min,
                    item.portion_grams_max,
                    item.sort_order,
                )
            except DatabaseError as exc:
                failed += 1
                logger.warning("Insert of item %d for meal %d failed: %s", position, meal_id, exc)
                continue
            inserted += 1

        logger.info(
            "Bulk insert for meal %d: inserted=%d skipped=%d failed=%d",
            meal_id,
            inserted,
            skipped,
            failed,
        )
        return inserted

    def bulk_insert_body(self, body: Optional[bytes]) -> int:
        """parse_request followed by bulk_insert"""
        request = self.parse_request(body)
        return self.bulk_insert(request.meal_id, request.items)
