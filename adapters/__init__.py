"""
Adapters package - External service connections.
"""

from adapters.sql_adapter import QueryGate

__all__ = [
    "QueryGate",
]
