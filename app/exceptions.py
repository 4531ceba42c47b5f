# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors carry a machine-readable code and, where possible, a hint on how to
# fix the request.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class DemoAppException(Exception):
    """
    Base exception for the demo API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "DEMO_APP_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Fixture Exceptions
# =============================================================================

class UnknownCategoryError(DemoAppException):
    """Raised when filtering findings by a category that doesn't exist."""

    def __init__(self, category: str, allowed: list[str]):
        super().__init__(
            message=f"Unknown finding category: {category}",
            code="UNKNOWN_CATEGORY",
            status_code=400,
            suggestion=f"Use one of: {', '.join(allowed)}",
            details={"category": category, "allowed_categories": allowed}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def demo_app_exception_handler(
    request: Request,
    exc: DemoAppException
) -> JSONResponse:
    """
    Convert DemoAppException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
