"""
WEB 420 API: Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for each error scenario.
How:   Each exception carries a user-facing message and an optional context
       dict. Global exception handlers (registered in main.py) map them to
       HTTP status codes and structured JSON bodies.
Who:   Raised by services; caught by the handlers in main.py.

Exception Hierarchy:
    Web420Error (base)
    ├── ValidationError           → 400 Bad Request
    ├── DuplicateUsernameError    → 401 Unauthorized
    ├── InvalidCredentialsError   → 401 Unauthorized
    ├── NotFoundError             → 404 Not Found
    ├── UnexpectedError           → 500 Internal Server Error
    └── DatabaseError             → 501 Not Implemented (store failure)

The 401 / 501 codes match the status codes existing API clients of the
signup and login endpoints already handle.
"""

from typing import Any, Dict, Optional


class Web420Error(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(Web420Error):
    """
    Raised when client input fails a business rule.

    When:    Request body is well-formed but conflicts with stored data,
             e.g. a customer username that is already taken.
    HTTP:    400 Bad Request
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


class NotFoundError(Web420Error):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that None
    into NotFoundError so the handler can answer 404.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DuplicateUsernameError(Web420Error):
    """
    Raised by signup when the username is already registered.

    Raised either by the existence check that precedes the insert, or by
    the unique index on users.username when two signups race past that check.
    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        username: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if username:
            ctx["username"] = username
        super().__init__(message="Username is already in use", context=ctx)


class InvalidCredentialsError(Web420Error):
    """
    Raised by login for an unknown username OR a wrong password.

    Both cases share one message and one status so a caller cannot tell
    which usernames exist.
    HTTP:    401 Unauthorized
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid username and/or password", context=context)


class DatabaseError(Web420Error):
    """
    Raised when a store operation fails.

    The message returned to the client is always generic. Driver error
    text goes into `context` and is only logged server-side.
    HTTP:    501
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnexpectedError(Web420Error):
    """
    Raised when a service catches a failure it has no specific kind for.

    Services wrap unknown exceptions in this type so every failure
    leaving them is classified.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred. Please try again or contact support.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
