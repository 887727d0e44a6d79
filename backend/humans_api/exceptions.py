"""
Humans API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the failure modes of the service.
Why:   Each exception type maps to exactly one HTTP status in the global
       handlers registered by main.py, so routes never build error responses
       by hand.
How:   Each exception carries a short user-facing message and an optional
       context dict that is logged but never returned to the client.

Exception Hierarchy:
    HumansAPIError (base)
    ├── NotFoundError            → 404 Not Found
    ├── DatabaseError            → 500 Internal Server Error (query failure)
    └── DatabaseConnectionError  → fatal at startup (never reaches a client)

Decode failures are not in this hierarchy: FastAPI raises
RequestValidationError for bodies that are not JSON or lack the required
fields, and main.py maps that to 400.

"No row matched" is NOT an exception inside the store. HumanStore returns
None / False for it; the route layer turns that into NotFoundError. A real
query failure is always a DatabaseError, so the two outcomes can never be
confused.
"""

from typing import Any, Dict, Optional


class HumansAPIError(Exception):
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


class NotFoundError(HumansAPIError):
    """
    Raised when the requested human does not exist.

    HTTP:    404 Not Found
    When:    GET/PUT/DELETE /humans/{id} where the store matched no row,
             including ids that can't be interpreted as a row key at all.
    """

    def __init__(
        self,
        message: str = "User not found",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class DatabaseError(HumansAPIError):
    """
    Raised when a store operation fails at query time.

    HTTP:    500 Internal Server Error
    When:    Connection lost mid-query, driver error, constraint violation.

    The message is a short fixed string per operation ("Failed to create
    user"); the driver error is only recorded in `context`.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseConnectionError(HumansAPIError):
    """
    Raised when the store cannot reach the database or establish its schema.

    When:    During bootstrap, before the server starts accepting requests.
    Effect:  Propagates out of the application lifespan, which aborts
             startup. The service must not serve without its table.
    """

    def __init__(
        self,
        message: str = "Could not initialize the database",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
