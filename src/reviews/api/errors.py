"""Map ReviewError kinds to HTTP responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reviews.errors import ErrorKind, ReviewError

logger = structlog.get_logger(__name__)

_STATUS_CODES = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.UNAVAILABLE: 503,
}


async def review_error_handler(request: Request, exc: ReviewError) -> JSONResponse:
    status_code = _STATUS_CODES[exc.kind]
    if status_code >= 500:
        logger.warning("Request failed on collaborator", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=status_code, content={"error": exc.kind.value, "message": exc.message})


def register_review_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ReviewError, review_error_handler)
