"""Health check and utility routes"""

from fastapi import APIRouter, Depends
import logging

from adapters.sql_adapter import QueryGate
from api.dependencies import get_gate
from api.responses import DatabaseHealthResponse, HealthResponse
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("dietapi.api.health")


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
def health_check():
    """Basic liveness check; does not touch the database"""
    return HealthResponse(status="ok", service=settings.app_name)


@router.get("/health/db", response_model=DatabaseHealthResponse)
def database_health(gate: QueryGate = Depends(get_gate)):
    """Round trip to the store through the query gate."""
    if gate.is_connected and gate.ping():
        return DatabaseHealthResponse(database="connected")
    logger.warning("Database health check failed")
    return DatabaseHealthResponse(database="unavailable")
