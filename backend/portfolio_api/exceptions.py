"""
Portfolio Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the few failure modes the API has.
Why:   Services raise one exception carrying the operation-specific message;
       global handlers (registered in main.py) turn it into the JSON body the
       frontend expects, so routes stay free of try/except blocks.
How:   Each exception carries a message (returned to the client) and an
       optional context dict (logged server-side only).

Exception Hierarchy:
    PortfolioError (base)
    ├── DatabaseError            → 500 {"error": message}
    │   └── SkillDeletionError   → 500 {"success": false, "message": message}
    └── FileStorageError         → 500 {"error": message}

There is no NotFoundError: an update or delete on an unknown id
succeeds because the affected row count is never inspected.
"""

from typing import Any, Dict, Optional


class PortfolioError(Exception):
    """
    Base exception for all portfolio backend errors.

    Attributes:
        message:  Client-facing error description
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


class DatabaseError(PortfolioError):
    """
    Raised when a store statement fails.

    The message names the operation ("Error adding skill", "Error fetching
    projects", ...). The underlying driver error only goes to the log.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class SkillDeletionError(DatabaseError):
    """Store failure while deleting a skill; rendered with a success flag."""

    def __init__(
        self,
        message: str = "Error deleting skill",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class FileStorageError(PortfolioError):
    """
    Raised when an uploaded image cannot be written to the upload directory.

    Removal failures never raise this: deleting a skill's image is best-effort.
    """

    def __init__(
        self,
        message: str = "Error saving uploaded image",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
