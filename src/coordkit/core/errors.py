"""
Custom exception hierarchy for coordkit.

Parsing never lets these escape the coordinate factory: they are used to
abort a single parse attempt and are converted into error strings at the
parse boundary. The API layer raises them to produce error responses.
"""

from typing import Any, Dict, List, Optional


class CoordkitException(Exception):
    """
    Base exception for all coordkit errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        status_code: HTTP status code for API responses
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize CoordkitException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            status_code: HTTP status code (default: 500)
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}', "
            f"status_code={self.status_code})"
        )


class CoordinateParseError(CoordkitException):
    """
    Raised when coordinate text or values cannot be turned into a coordinate.

    The individual problems are kept in ``errors`` in the order they were
    found, so callers can report every violation at once.
    """

    def __init__(
        self,
        message: str = "Coordinate could not be parsed",
        errors: Optional[List[str]] = None,
        system: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        details = dict(details or {})
        self.errors = list(errors) if errors else [message]
        details["errors"] = self.errors
        if system:
            details["system"] = system

        super().__init__(
            message=message,
            error_code="PARSE_ERROR",
            status_code=422,
            details=details,
            suggestions=suggestions
            or ["Check the coordinate text against the expected notation"],
        )


class GridConversionError(CoordkitException):
    """Raised when a grid backend (MGRS or UTM) fails to convert a value."""

    def __init__(
        self,
        message: str,
        grid: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        details = dict(details or {})
        if grid:
            details["grid"] = grid

        super().__init__(
            message=message,
            error_code="GRID_ERROR",
            status_code=422,
            details=details,
            suggestions=suggestions,
        )


class ConfigurationError(CoordkitException):
    """Raised when the application configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if config_key:
            details["config_key"] = config_key

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            status_code=500,
            details=details,
            suggestions=["Check the COORDKIT_* environment variables"],
        )
