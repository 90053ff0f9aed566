import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from mesto.errors import UserError, ValidationError

logger = structlog.get_logger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


async def user_error_handler(request: Request, exc: Exception) -> Response:
    """Render any UserError with the status code its kind carries."""
    if isinstance(exc, UserError):
        return create_json_error_response(status_code=exc.status_code, message=str(exc), error_type=exc.error_type)
    return await general_exception_handler(request, exc)


async def request_validation_handler(_: Request, exc: Exception) -> Response:
    """Render request body/params that fail schema checks as a 400 validation error."""
    detail = ValidationError()
    if isinstance(exc, RequestValidationError) and exc.errors():
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = ValidationError(f"{location}: {first.get('msg')}" if location else str(first.get("msg")))
    return create_json_error_response(status_code=detail.status_code, message=str(detail), error_type=detail.error_type)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.error("unexpected_error", error=str(exc), exc_info=exc)
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
