"""
Users API Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the anticipated failure cases.
How:   Each exception carries a client-facing message and an optional context
       dict. Global exception handlers (registered in main.py) catch these and
       return JSON error bodies with the matching HTTP status code.
Who:   Raised by the user service; caught by the global handlers.

Exception Hierarchy:
    UsersAPIError (base)
    ├── ValidationError   → 400 Bad Request
    └── NotFoundError     → 404 Not Found

Both are expected outcomes of a request, not crashes: the service raises
them, and the response body is always `{"error": <message>}`.
"""

from typing import Any, Dict, Optional


class UsersAPIError(Exception):
    """
    Base exception for all Users API application errors.

    Attributes:
        message:  Client-facing error description (returned in the response)
        context:  Additional debug info (logged, never returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(UsersAPIError):
    """
    Raised when client input fails presence validation.

    When:    POST /api/users without a non-empty name or email.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Name and email are required"}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        fields: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["fields"] = list(fields)
        super().__init__(message=message, context=ctx)
        self.fields = list(fields or [])


class NotFoundError(UsersAPIError):
    """
    Raised when a requested record does not exist.

    When:    GET/PUT/DELETE /api/users/{id} with an id no record carries.
    HTTP:    404 Not Found

    The message is always "<resource> not found"; the id goes into context
    only, so the response body stays `{"error": "User not found"}`.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id
