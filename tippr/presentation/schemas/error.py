"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["INVALID_BILL_AMOUNT"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message, safe to show verbatim",
        examples=["Please enter a valid bill amount"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "INVALID_BILL_AMOUNT",
                    "message": "Please enter a valid bill amount",
                    "request_id": "abc123",
                }
            ]
        }
    }
