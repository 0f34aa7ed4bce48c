"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["INVALID_DECISION_REQUEST"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Amar: credit_score must be positive"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "INVALID_DECISION_TREE",
                    "message": "Node with threshold 600 is reachable more than once",
                    "request_id": "abc123",
                }
            ]
        }
    }
