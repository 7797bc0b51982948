"""Exception classes for indexnum.

The index transform itself never raises on malformed documents. These
exceptions are raised at the package boundary, when directive handlers are
registered.
"""

from __future__ import annotations


class IndexNumError(Exception):
    """Base exception for all indexnum errors.

    Subclass this for specific error categories.
    """

    pass


class RegistrationError(IndexNumError, ValueError):
    """A directive handler cannot be registered.

    Raised when a handler lacks a required attribute or claims a directive
    name that is already taken.
    """

    def __init__(self, handler_name: str, message: str) -> None:
        """Initialize registration error.

        Args:
            handler_name: Class name of the offending handler
            message: Description of the error
        """
        self.handler_name = handler_name
        super().__init__(f"Handler '{handler_name}': {message}")
