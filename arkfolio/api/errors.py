"""
API error handling and exception mapping.

Converts domain errors and request validation failures into JSON
``ErrorResponse`` bodies with the matching HTTP status.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from arkfolio.api.schemas.base import ErrorResponse
from arkfolio.infra.config.logging_config import get_logger

logger = get_logger("api.errors")


class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ThemeNotFoundError(DomainError):
    """Raised when no active theme has the requested slug."""

    def __init__(self, slug: str):
        super().__init__(f"Theme '{slug}' not found", "THEME_NOT_FOUND")


class DefaultThemeNotConfiguredError(DomainError):
    """Raised when no active theme is flagged as default."""

    def __init__(self):
        super().__init__("No default theme configured", "DEFAULT_THEME_NOT_CONFIGURED")


STATUS_CODE_MAPPING = {
    "THEME_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "DEFAULT_THEME_NOT_CONFIGURED": status.HTTP_404_NOT_FOUND,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """
    Handle domain-specific errors.

    Args:
        request: The HTTP request
        exc: The domain error

    Returns:
        JSONResponse: Formatted error response
    """
    logger.warning("domain.error", code=exc.code, detail=exc.message)

    status_code = STATUS_CODE_MAPPING.get(
        exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    error_response = ErrorResponse(error=exc.code, detail=exc.message)
    return JSONResponse(
        status_code=status_code, content=error_response.model_dump(mode="json")
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning("validation.error", errors=str(exc.errors()))

    formatted_errors = []
    for error in exc.errors():
        location = " -> ".join(str(loc) for loc in error["loc"])
        formatted_errors.append(f"{location}: {error['msg']}")

    error_response = ErrorResponse(
        error="VALIDATION_ERROR",
        detail="Validation failed: " + "; ".join(formatted_errors),
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response.model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
