"""
Pydantic schemas shared by all routes.

No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error body returned by all error replies."""

    model_config = ConfigDict(extra="forbid")

    error: str
