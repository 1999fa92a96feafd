"""Services package - Business logic layer"""

from services.template_service import TemplateService
from services.benchmark_service import BenchmarkService
from services.food_service import FoodService

__all__ = [
    "TemplateService",
    "BenchmarkService",
    "FoodService",
]
