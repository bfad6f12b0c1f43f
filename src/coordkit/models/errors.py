"""
Pydantic models for standardized error responses.

Every error answered by the API uses ``ErrorResponse`` so clients can
handle failures programmatically.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class ErrorDetail(BaseModel):
    """
    A single problem behind an error response.

    Used for request validation failures and for each message of a rejected
    coordinate.
    """

    field: Optional[str] = Field(None, description="Field name that caused the error")
    message: str = Field(..., description="Error message for this field")
    code: Optional[str] = Field(None, description="Error code for this specific issue")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "input",
                "message": "[ERROR] Latitude degrees value (91°) exceeds max value (90).",
                "code": "PARSE_ERROR",
            }
        }
    )


class ErrorResponse(BaseModel):
    """
    Standardized error response model for all API errors.

    Attributes:
        error_code: Machine-readable error identifier (e.g., 'PARSE_ERROR')
        message: Human-readable error message
        details: Optional dictionary with additional technical details
        timestamp: When the error occurred (UTC)
        request_id: Optional request correlation ID for tracing
        suggestions: Optional list of actionable suggestions for resolution
        errors: Optional list of detailed errors
    """

    error_code: str = Field(
        ...,
        description="Machine-readable error code",
        examples=["VALIDATION_ERROR", "PARSE_ERROR", "GRID_ERROR"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Coordinate could not be parsed", "Request validation failed"],
    )
    details: Optional[Dict[str, Any]] = Field(
        None,
        description="Additional technical details about the error",
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="When the error occurred (UTC)",
    )
    request_id: Optional[str] = Field(
        None,
        description="Request correlation ID for tracing",
    )
    suggestions: Optional[List[str]] = Field(
        None,
        description="Actionable suggestions for resolving the error",
    )
    errors: Optional[List[ErrorDetail]] = Field(
        None,
        description="Detailed errors, one per problem found",
    )

    @field_serializer('timestamp')
    def serialize_timestamp(self, timestamp: datetime, _info) -> str:
        """Serialize timestamp to ISO format string."""
        return timestamp.isoformat() + 'Z' if timestamp.tzinfo is None else timestamp.isoformat()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "PARSE_ERROR",
                "message": "Coordinate could not be parsed",
                "details": {
                    "system": "ddm",
                    "errors": ["[ERROR] Too many bearings."],
                },
                "timestamp": "2025-11-10T15:30:00Z",
                "suggestions": [
                    "Check the coordinate text against the expected notation",
                ],
                "errors": [
                    {
                        "field": "input",
                        "message": "[ERROR] Too many bearings.",
                        "code": "PARSE_ERROR",
                    }
                ],
            }
        }
    )
