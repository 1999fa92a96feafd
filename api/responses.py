"""
Standardized API response models and utilities.
Every failure leaves the service as {"success": false, "error": "<text>"}.
"""

from typing import Optional
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standardized error response"""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")


class DatabaseHealthResponse(BaseModel):
    """Database connectivity check"""

    database: str = Field(..., description="'connected' or 'unavailable'")


def error_response(message: str) -> dict:
    """Create a standardized error body"""
    return {"success": False, "error": message}


# OpenAPI documentation for the error envelopes shared by the data routes
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Database error"},
}
