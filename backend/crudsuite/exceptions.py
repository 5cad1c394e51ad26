"""
crudsuite — Custom Exception Hierarchy
========================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the matching HTTP status code.
Who:   Raised by stores and routes; caught by global handlers.

Exception Hierarchy:
    CrudSuiteError (base)
    ├── ValidationError   → 400 Bad Request (missing/invalid required field)
    ├── NotFoundError     → 404 Not Found (project or task, project routes only)
    └── StoreError        → 500 Internal Server Error (any persistence failure)

Every error body carries a `message`; the context dict is logged server-side
and never returned for StoreError.
"""

from typing import Any, Dict, List, Optional


class CrudSuiteError(Exception):
    """
    Base exception for all crudsuite application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not always returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CrudSuiteError):
    """
    Raised when client input fails validation.

    When:    A required field is missing, empty, or of the wrong type,
             or the request body is not valid JSON.
    HTTP:    400 Bad Request

    We answer 400 rather than FastAPI's default 422 so every resource reports
    field problems the same way.

    Example response:
        {
            "error": "validation_error",
            "message": "Missing or invalid fields: price",
            "details": {"fields": ["price"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        fields: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["fields"] = fields
        super().__init__(message=message, context=ctx)
        self.fields = fields or []


class NotFoundError(CrudSuiteError):
    """
    Raised when a referenced project or task does not exist.

    HTTP:    404 Not Found

    The store returns None / zero matches for missing documents; the store
    converts that into this exception so routes stay free of branching.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class StoreError(CrudSuiteError):
    """
    Raised when a MongoDB operation fails, including loss of connectivity.

    HTTP:    500 Internal Server Error

    The message is a generic per-operation text such as
    "Failed to load products". The driver error type goes into context and
    is only logged.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
