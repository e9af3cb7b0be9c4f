"""REST API error response models.

Documents the JSON body every error handler returns.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error, e.g. a non-positive term_months."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "term_months",
                "message": "term_months must be a positive integer, got 0",
                "code": "INVALID_TERM",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Vehicle with identifier 'abc' not found",
                "code": "NOT_FOUND"
            }

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "vehicle_price",
                        "message": "Must be a valid decimal: 12,000",
                        "code": "INVALID_DECIMAL"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier 'abc' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "term_months",
                            "message": "term_months must be a positive integer, got 0",
                            "code": "INVALID_TERM",
                        }
                    ],
                },
            ]
        }
    )
