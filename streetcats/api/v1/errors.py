"""
Mapping from domain errors to HTTP responses.

Every error response has the same body:
    {"detail": {"error": "<ErrorCode>", "message": "<text>"}}
"""

# Standard library imports
import logging
from typing import Any, Dict

# External package imports
from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ...core.config import get_settings
from ...domain.exceptions import ErrorCode, StreetCatsError

logger = logging.getLogger(__name__)


ERROR_STATUS_CODES: Dict[ErrorCode, int] = {
    ErrorCode.MISSING_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.MALFORMED_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.UNKNOWN_USER: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.METHOD_NOT_ALLOWED: status.HTTP_405_METHOD_NOT_ALLOWED,
    ErrorCode.UPLOAD_TOO_LARGE: 413,
    ErrorCode.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_body(code: ErrorCode, message: str) -> Dict[str, Any]:
    return {"error": code.value, "message": message}


def to_http_exception(error: StreetCatsError) -> HTTPException:
    """
    Convert a domain error into the HTTPException FastAPI renders

    Args:
        error: Any StreetCatsError raised below the API layer

    Returns:
        HTTPException with the mapped status and the standard body
    """
    status_code = ERROR_STATUS_CODES[error.code]
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    if status_code >= 500:
        return internal_error(error, "Internal error")
    return HTTPException(
        status_code=status_code,
        detail=error_body(error.code, error.message),
        headers=headers,
    )


def internal_error(exception: Exception, context: str) -> HTTPException:
    """
    Log an unexpected failure and build a 500 response that withholds details

    Args:
        exception: The failure caught at the route boundary
        context: Short description of the operation, for the log line

    Returns:
        HTTPException with code InternalError
    """
    logger.error(f"{context}: {exception}", exc_info=exception)
    detail = error_body(ErrorCode.INTERNAL, "Internal server error")
    if get_settings().debug:
        detail["details"] = repr(exception)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    )


# Framework-raised errors (unknown route, wrong method) carry a bare string detail
FRAMEWORK_ERROR_CODES: Dict[int, ErrorCode] = {
    status.HTTP_400_BAD_REQUEST: ErrorCode.VALIDATION,
    status.HTTP_401_UNAUTHORIZED: ErrorCode.MISSING_TOKEN,
    status.HTTP_403_FORBIDDEN: ErrorCode.FORBIDDEN,
    status.HTTP_404_NOT_FOUND: ErrorCode.NOT_FOUND,
    status.HTTP_405_METHOD_NOT_ALLOWED: ErrorCode.METHOD_NOT_ALLOWED,
    413: ErrorCode.UPLOAD_TOO_LARGE,
}


async def http_exception_handler(request: Request, exception: StarletteHTTPException) -> JSONResponse:
    """
    Render every HTTPException in the standard error body

    Details already shaped by to_http_exception pass through unchanged.
    """
    detail = exception.detail
    if not isinstance(detail, dict):
        code = FRAMEWORK_ERROR_CODES.get(exception.status_code, ErrorCode.INTERNAL)
        if exception.status_code == status.HTTP_404_NOT_FOUND:
            logger.info(f"Route not found: {request.method} {request.url.path}")
        detail = error_body(code, str(detail))
    return JSONResponse(
        status_code=exception.status_code,
        content={"detail": detail},
        headers=getattr(exception, "headers", None),
    )
