"""
Custom exceptions for the ConfStore package.

This module defines a hierarchical exception system that provides:
1. Specific, technical error information for debugging and logging
2. User-friendly error messages for end-users
3. Error codes for consistent error identification
4. Optional context information for additional debugging
"""

from typing import Optional, Dict, Any


class ConfStoreError(Exception):
    """Base exception for all ConfStore errors."""

    # Default values
    error_code = "CS-GENERIC-ERROR"
    user_message = "An unexpected error occurred."

    def __init__(
        self,
        message: Optional[str] = None,
        user_message: Optional[str] = None,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        # Technical message for logs
        self.message = message or self.__class__.__doc__ or "An error occurred."
        super().__init__(self.message)

        # User-friendly message
        self.user_message = user_message or self.__class__.user_message

        self.error_code = error_code or self.__class__.error_code

        # Additional context
        self.context = context or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dictionary for structured output."""
        error_dict = {
            "error_code": self.error_code,
            "message": self.user_message,
        }

        if self.context.get('debug'):
            error_dict["technical_details"] = {
                "message": self.message,
                "context": self.context,
            }
            if self.cause:
                error_dict["technical_details"]["cause"] = str(self.cause)

        return error_dict


# Store Errors - 1000 range
class StoreError(ConfStoreError):
    """Base exception for all store-related errors."""
    error_code = "CS-STORE-1000"
    user_message = "A configuration store error occurred."


class InvalidKeyError(StoreError):
    """Exception raised when a setting key is not a non-empty string."""
    error_code = "CS-STORE-1001"
    user_message = "The setting key must be a non-empty string."


class InvalidArgumentError(StoreError):
    """Exception raised when settings cannot be merged from the given value."""
    error_code = "CS-STORE-1002"
    user_message = "Settings can only be merged from a mapping or another store."


# Loader Errors - 2000 range
class LoaderError(ConfStoreError):
    """Exception raised when configuration files cannot be loaded."""
    error_code = "CS-LOAD-2000"
    user_message = "Unable to load the configuration files. Please check the directory and file formats."
