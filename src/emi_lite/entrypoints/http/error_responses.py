"""REST API error response models.

Documented in OpenAPI as the body shape of every non-2xx response.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """A single field-level error."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "principal",
                "message": "Must be a number: abc",
                "code": "INVALID_NUMBER",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response.

    Examples:
        Simple error:
            {
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR"
            }

        Validation error with fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "months", "message": "Must be a number: sixty", "code": "INVALID_NUMBER"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "An unexpected error occurred", "code": "INTERNAL_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "principal",
                            "message": "Must be a number: abc",
                            "code": "INVALID_NUMBER",
                        },
                        {
                            "field": "months",
                            "message": "Must be a number: sixty",
                            "code": "INVALID_NUMBER",
                        },
                    ],
                },
            ]
        }
    )
