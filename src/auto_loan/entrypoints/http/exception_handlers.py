"""FastAPI exception handlers.

Translate domain errors and framework validation errors into ErrorResponse JSON.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from auto_loan.domain.errors import DomainError

logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE = 422

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": HTTP_422_UNPROCESSABLE,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _request_context(request: Request) -> dict[str, str]:
    return {"path": request.url.path, "method": request.method}


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Handle all domain errors.

    Status comes from STATUS_BY_ERROR_CODE; unknown codes map to 400.
    Field-level errors (ValidationError, including InvalidTerm) are passed
    through in the "errors" array.

    Args:
        request: FastAPI request object
        exc: Domain error to handle

    Returns:
        JSON response with structured error format
    """
    error_dict = exc.to_dict()
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    if status_code >= 500:
        logger.error(
            "Domain error occurred",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                "context": exc.context,
                **_request_context(request),
            },
        )
    else:
        logger.info(
            "Client error",
            extra={
                "error_code": exc.error_code,
                "error_message": exc.message,
                **_request_context(request),
            },
        )

    content: dict[str, Any] = {
        "detail": error_dict.get("message", str(exc)),
        "code": error_dict.get("code", exc.error_code),
    }
    if "errors" in error_dict:
        content["errors"] = error_dict["errors"]

    return JSONResponse(status_code=status_code, content=content)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI/Pydantic validation errors.

    Type and format errors caught before the domain sees the request, e.g.
    vehicle_price="abc", a missing annual_interest_rate_percent, or
    term_months="twelve".
    """
    errors = []

    for error in exc.errors():
        # Drop the 'body'/'query' prefix from the location
        field_path = ".".join(str(loc) for loc in error["loc"] if loc not in ("body", "query"))
        errors.append(
            {
                "field": field_path,
                "message": error["msg"],
                "code": error["type"],
            }
        )

    logger.info(
        "Request validation error",
        extra={"errors": errors, **_request_context(request)},
    )

    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content={
            "detail": "Invalid request parameters",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        },
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError raised outside the domain error hierarchy."""
    logger.info(
        "Value error",
        extra={"error_message": str(exc), **_request_context(request)},
    )

    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content={
            "detail": str(exc),
            "code": "INVALID_VALUE",
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler; logs the traceback and hides details from the client."""
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "error_message": str(exc),
            **_request_context(request),
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, handle_value_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.info("Exception handlers registered")
