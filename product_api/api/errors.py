"""Translation of domain errors into HTTP responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from product_api.exceptions import ApiError
from product_api.schemas.response import ResponseMessage

logger = logging.getLogger(__name__)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Render an ``ApiError`` as ``{"message": ...}`` with its status code."""
    logger.info(
        f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
    )
    body = ResponseMessage(message=exc.message).to_json()
    return JSONResponse(status_code=exc.status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handler on the application.

    Anything that is not an ``ApiError`` is left to FastAPI's default handling.
    """
    app.add_exception_handler(ApiError, api_error_handler)
