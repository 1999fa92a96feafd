"""
Process-scoped application context.

Created once at startup, handed to routes through FastAPI dependencies and
torn down at shutdown. Holds the settings and the query gate; nothing else
in the application keeps a database handle.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from adapters.sql_adapter import QueryGate
from app.config import Settings

logger = logging.getLogger("dietapi.context")


@dataclass
class AppContext:
    settings: Settings
    gate: QueryGate

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        gate = QueryGate.from_url(settings.sqlalchemy_url, echo=settings.db_echo)
        return cls(settings=settings, gate=gate)

    def close(self) -> None:
        try:
            self.gate.close()
        except Exception as exc:
            logger.exception("Error closing database connection during shutdown: %s", exc)
