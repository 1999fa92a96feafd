"""
Domain models package - SQLAlchemy ORM models describing the schema.
"""

from domain.models.database import Base, create_db_engine, create_schema
from domain.models.food import FoodCategory, FoodItem
from domain.models.diet_template import DietTemplate, DietDay, DietMeal, DietMealItem

__all__ = [
    # Database
    "Base",
    "create_db_engine",
    "create_schema",
    # Food models
    "FoodCategory",
    "FoodItem",
    # Template models
    "DietTemplate",
    "DietDay",
    "DietMeal",
    "DietMealItem",
]
