"""
RecipeBox Backend: Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services; caught by global handlers.
When:  During request processing when a request cannot be completed.

Exception Hierarchy:
    RecipeBoxError (base)
    ├── ValidationError             → 400 Bad Request (client can fix)
    │   └── InvalidIdentifierError  → 400 Bad Request (malformed ObjectId)
    ├── NotFoundError               → 404 Not Found
    └── DatabaseError               → 500 Internal Server Error

    Anything else that escapes a handler is answered with a 500 by the
    catch-all handler in main.py.
"""

from typing import Any, Dict, Optional


class RecipeBoxError(Exception):
    """
    Base exception for all RecipeBox application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info; returned as `details` only for
                  client errors, logged server-side for everything else
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RecipeBoxError):
    """
    Raised when client input fails validation.

    When:    Missing required recipe fields, unknown cuisine name, non-object body.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Missing fields required",
            "details": {"missing_fields": ["cuisine", "tags"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidIdentifierError(ValidationError):
    """
    Raised when a path identifier is not a valid MongoDB ObjectId.

    The driver raises bson.errors.InvalidId for these; the service converts
    it so the request ends with a 400 instead of an unexpected-error 500.
    """

    def __init__(self, identifier: Any, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["id"] = str(identifier)
        super().__init__(
            message=f"'{identifier}' is not a valid recipe identifier",
            field="id",
            context=ctx,
        )
        self.identifier = identifier


class NotFoundError(RecipeBoxError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /recipes/{id} with an id that matches no document.
    HTTP:    404 Not Found

    The driver returns None / a zero matched or deleted count for missing
    documents; the service converts that into this exception.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(RecipeBoxError):
    """
    Raised when document store operations fail unexpectedly.

    When:    Server selection timeout, connection lost mid-operation, write error.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic. The operation
        name and driver error type are kept in `context` and logged only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
