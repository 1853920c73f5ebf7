import logging

from fastapi import FastAPI

from emi_lite.entrypoints.http.error_responses import ErrorResponse
from emi_lite.entrypoints.http.exception_handlers import register_exception_handlers
from emi_lite.entrypoints.http.routes.calculator import router as calculator_router
from emi_lite.entrypoints.http.routes.emi import router as emi_router
from emi_lite.entrypoints.http.routes.health import router as health_router
from emi_lite.infra.config import log_level


def build_app() -> FastAPI:
    logging.getLogger("emi_lite").setLevel(log_level())

    app = FastAPI(
        title="EMI Lite API",
        description="""
        Loan installment (EMI) calculator API.

        ## Features
        - Calculate EMI, total payment and total interest
        - Render the calculator panel with en-IN formatted figures (₹)
        - Reset the calculator to its default inputs

        ## Authentication
        None. All endpoints are stateless.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(emi_router, prefix="/v1")
    app.include_router(calculator_router, prefix="/v1")

    return app


app = build_app()
