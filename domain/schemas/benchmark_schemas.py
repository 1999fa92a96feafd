"""Schemas for the bulk-insert benchmark endpoint"""

from typing import Any, List

from pydantic import BaseModel, Field


class BulkInsertItem(BaseModel):
    """One meal item row that passed shape validation"""

    food_item_id: int
    portion_grams_min: int
    portion_grams_max: int
    sort_order: int


class BulkInsertRequest(BaseModel):
    """
    Batch payload. Items are kept raw: each one is validated on its own
    while inserting, and malformed items are skipped rather than rejected.
    """

    meal_id: int
    items: List[Any] = Field(default_factory=list)


class BulkInsertResponse(BaseModel):
    success: bool = True
    inserted_count: int = Field(..., ge=0, description="Rows actually inserted")
