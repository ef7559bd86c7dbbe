"""Error Handlers — global exception handlers funnelling every failure through translate_error.

Invariants:
    - OrderServiceError → translated as-is (status from the taxonomy)
    - RequestValidationError → StructuralValidationError with field → message map
    - Starlette HTTPException (unknown route, bad method) → RequestRejectedError
    - Exception (catch-all) → 500, never leaks internal details
    - Every response body has exactly: status, message, timestamp, errors

Design Decisions:
    - Framework exceptions adapted into the domain taxonomy first, so one pure
      function (core/error_translation.py) owns the whole policy
    - Extracted from main.py (ADR: import fan-out)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from order_service.core.error_translation import translate_error
from order_service.core.errors import (
    OrderServiceError, RequestRejectedError, StructuralValidationError,
)

logger = logging.getLogger(__name__)

# Leading loc segments that name the request part, not the field
_REQUEST_PARTS = frozenset({"body", "query", "path", "header", "cookie"})


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def error_json_response(request: Request, exc: BaseException) -> JSONResponse:
    """Translate `exc` and render it: the single exit for failures."""
    body = translate_error(exc)
    if body.status < 500:
        logger.warning(
            f"{body.status} on {request.method} {request.url.path}: {body.message}",
            extra={
                "error_code": getattr(exc, "code", None),
                "path": request.url.path,
                "status_code": body.status,
            },
        )
    return JSONResponse(
        status_code=body.status,
        content=body.model_dump(mode="json", by_alias=True),
    )


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(OrderServiceError)
    async def domain_error_handler(request: Request, exc: OrderServiceError):
        return error_json_response(request, exc)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        return error_json_response(
            request, StructuralValidationError(field_errors(exc.errors())),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for HTTP errors raised by routing itself."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_json_response(
            request, RequestRejectedError(str(exc.detail), exc.status_code),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        return error_json_response(request, exc)


def field_errors(errors: list[dict]) -> dict[str, str]:
    """Collapse Pydantic error entries into field path → first message."""
    result: dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _REQUEST_PARTS:
            loc = loc[1:]
        field = ".".join(loc) or "request"
        result.setdefault(field, error.get("msg", "Invalid value"))
    return result
