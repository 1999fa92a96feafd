"""
Domain mappers package.
Handles transformation between raw result rows and response DTOs.
"""

from domain.mappers.diet_mapper import DietMapper
from domain.mappers.food_mapper import FoodMapper

__all__ = ["DietMapper", "FoodMapper"]
