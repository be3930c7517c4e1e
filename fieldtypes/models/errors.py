# ABOUTME: Error response models and OpenAPI response examples
# ABOUTME: Pydantic models for API error responses and shared response schemas

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""
    code: str
    message: str
    details: dict | None = None


def _error_example(code: str, message: str) -> dict:
    """Builds a single OpenAPI response entry with an error example."""
    return {
        "model": ErrorResponse,
        "content": {"application/json": {"example": {"code": code, "message": message}}},
    }


# Reusable OpenAPI response fragments for route decorators
FIELD_NOT_FOUND = {
    404: {
        "description": "Field not present in the descriptor list",
        **_error_example("FIELD_NOT_FOUND", "No field named 'price'"),
    }
}

INVALID_OVERRIDE = {
    400: {
        "description": "Field type cannot be toggled",
        **_error_example(
            "INVALID_OVERRIDE",
            "Field 'price' is quantitative; only ordinal and nominal fields can be toggled",
        ),
    }
}
