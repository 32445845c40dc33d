"""
Custom exceptions for urlzip.

This module defines exception classes for the string codec and its
collaborators.
"""
from typing import Optional


class UrlzipException(Exception):
    """Base exception for all urlzip errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class InitializationError(UrlzipException):
    """Exception raised when the compression backend cannot be constructed."""
    pass


class NotInitializedError(UrlzipException):
    """Exception raised when a synchronous call runs before the backend is ready."""
    pass


class DecodeError(UrlzipException):
    """Exception raised when input is not data produced by this codec."""
    pass


class CorruptDataError(DecodeError):
    """Exception raised when the backend rejects a compressed stream."""
    pass


class RPCError(UrlzipException):
    """Exception raised for remote procedure call failures."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        status: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            path: Procedure path that failed
            status: HTTP status code (if available)
        """
        self.path = path
        self.status = status
        super().__init__(message, status)
