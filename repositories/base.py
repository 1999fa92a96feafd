"""
Base repository for the data access layer.
Repositories hold the SQL for one area and run it through the shared query gate.
"""

from typing import Any, List, Mapping, Optional
from abc import ABC

from adapters.sql_adapter import QueryGate, Row


class BaseRepository(ABC):
    """
    Common plumbing for gate-backed repositories.
    All repositories should inherit from this class.
    """

    def __init__(self, gate: QueryGate):
        self.gate = gate

    def fetch_all(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> List[Row]:
        """Run a query and return every row"""
        return self.gate.query(sql, params)

    def fetch_one(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Row]:
        """Run a query and return the first row, or None when there is none"""
        rows = self.gate.query(sql, params)
        return rows[0] if rows else None
