"""
Domain layer - Schema models, response schemas and row mappers.
"""

from domain import mappers, models, schemas

__all__ = ["mappers", "models", "schemas"]
