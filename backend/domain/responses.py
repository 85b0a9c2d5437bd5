"""
Standard error envelope models.

Metadata documents are returned bare (marketplaces expect the raw schema);
errors always use the envelope rendered by the handlers in main.py:
- Error: { "success": false, "error": { "code": "...", "message": "...", "details": {...} } }
"""
from typing import Any
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Standard error detail structure."""
    code: str = Field(..., description="Error code (e.g., 'validation', 'http_error')")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Additional error context")


class StandardErrorResponse(BaseModel):
    """Standard error response envelope."""
    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")


def error_content(code: str, message: str, details: Any = None) -> dict[str, Any]:
    """Build the error envelope body shared by all exception handlers."""
    return {
        "success": False,
        "error": {
            "code": code,
            "message": message,
            "details": details,
        },
    }


ERROR_RESPONSES = {
    400: {"model": StandardErrorResponse, "description": "Invalid request parameter"},
    500: {"model": StandardErrorResponse, "description": "Unexpected server error"},
}
