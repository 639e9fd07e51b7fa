"""
Users API Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI document served at /docs.

Request bodies declare every field optional. Presence is checked by the
service, so a missing name on POST produces the service's 400 response
rather than FastAPI's automatic 422.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What clients send
# ══════════════════════════════════════════════════════════════════════════


class UserCreate(BaseModel):
    """Body of POST /api/users. Both fields must be present and non-empty."""
    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Contact email (format not checked)")


class UserUpdate(BaseModel):
    """
    Body of PUT /api/users/{id}.

    Each field is applied independently, and only when present and non-empty.
    An empty body is a valid no-op update.
    """
    name: Optional[str] = Field(default=None, description="New display name")
    email: Optional[str] = Field(default=None, description="New contact email")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns
# ══════════════════════════════════════════════════════════════════════════


class UserResponse(BaseModel):
    """A single user record as returned by every /api/users endpoint."""
    id: int = Field(description="System-assigned identifier")
    name: str = Field(description="Display name")
    email: str = Field(description="Contact email")

    model_config = {"from_attributes": True}


class InfoResponse(BaseModel):
    """Returned by GET /."""
    message: str = Field(description="Service banner")
    version: str = Field(description="Application version")
    status: str = Field(default="running", description="Always 'running' while serving")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(default="healthy", description="Always 'healthy' while serving")
    timestamp: str = Field(description="Check time, ISO 8601 UTC with milliseconds")


# ══════════════════════════════════════════════════════════════════════════
# Error Response Model — Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body for every failed request.

    Examples:
        {"error": "User not found"}
        {"error": "Name and email are required"}
        {"error": "Something went wrong!", "message": "division by zero"}
    """
    error: str = Field(description="Error description")
    message: Optional[str] = Field(
        default=None,
        description="Underlying error text (500 responses only)",
    )
