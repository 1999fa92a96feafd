"""API routes package"""

from . import health, templates, benchmark, categories, foods

__all__ = ["health", "templates", "benchmark", "categories", "foods"]
