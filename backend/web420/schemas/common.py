"""
WEB 420 API: Shared Pydantic Schemas
====================================

What:  Base model and the response shapes shared by every route module.
How:   Every request/response model inherits CamelModel, so fields are
       snake_case in Python and camelCase on the wire (firstName,
       emailAddresses, lineItems, ...), the JSON shape API clients send.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for API models.

    alias_generator:   first_name ↔ firstName
    populate_by_name:  services may still construct models with snake_case kwargs
    from_attributes:   models validate straight from ORM rows
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageResponse(CamelModel):
    """Status-only confirmation, e.g. {"message": "User logged in"}."""

    message: str = Field(description="Human-readable status message")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "invalid_credentials",
            "message": "Invalid username and/or password",
            "request_id": "1f0c9a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(CamelModel):
    """Returned by GET /health for monitoring and load balancer probes."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
