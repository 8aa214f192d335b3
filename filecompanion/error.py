import logging

from fastapi.responses import JSONResponse

from filecompanion.exceptions import AuthenticationError, IntegrationError, NotFoundError, RateLimitError
from filecompanion.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def error_to_response(err: Exception) -> tuple[int, ErrorResponse] | None:
    """Map a known provider error to an HTTP status and body. Returns None for anything else."""
    if isinstance(err, AuthenticationError):
        return 401, ErrorResponse(error_code="auth_error", message=str(err))
    if isinstance(err, NotFoundError):
        return 404, ErrorResponse(error_code="not_found", message=str(err))
    if isinstance(err, RateLimitError):
        return 429, ErrorResponse(error_code="rate_limit", message=str(err))
    if isinstance(err, IntegrationError):
        if err.status_code is not None and err.status_code >= 500:
            return 502, ErrorResponse(error_code="provider_error", message=str(err))
        return 500, ErrorResponse(error_code="integration_error", message=str(err))
    return None


def respond_with_error(err: Exception) -> JSONResponse | None:
    """Build the error response for a recognized provider error, or None if the caller must handle it."""
    mapped = error_to_response(err)
    if mapped is None:
        return None
    status_code, body = mapped
    logger.warning("Provider request failed with %d: %s", status_code, body.message)
    return JSONResponse(status_code=status_code, content=body.model_dump())
