from fastapi import FastAPI

from auto_loan.entrypoints.http.error_responses import ErrorResponse
from auto_loan.entrypoints.http.exception_handlers import register_exception_handlers
from auto_loan.entrypoints.http.routes.health import router as health_router
from auto_loan.entrypoints.http.routes.loans import router as loans_router
from auto_loan.entrypoints.http.routes.vehicles import router as vehicles_router
from auto_loan.infra.logging_config import configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Auto Loan API",
        description="""
        Auto loan calculator API: financed amount, monthly payment and amortization schedule.

        ## Features
        - Derive the financed amount from price, tax, trade-in, incentives and fees
        - Quote a fixed monthly payment
        - Generate a month-by-month amortization schedule with totals
        - Look up catalog vehicles to label a summary

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        responses={
            422: {"model": ErrorResponse, "description": "Validation error"},
            500: {"model": ErrorResponse, "description": "Internal error"},
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(loans_router, prefix="/v1")
    app.include_router(vehicles_router, prefix="/v1")

    return app


app = build_app()
