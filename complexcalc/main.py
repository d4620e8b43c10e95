from __future__ import annotations

import logging
import os

from fastapi import FastAPI

from complexcalc.application.dtos.common_dto import HealthResponse, RootResponse
from complexcalc.infrastructure.api.middlewares import add_default_middlewares
from complexcalc.infrastructure.api.routes.calculator_routes import router as calculator_router
from complexcalc.infrastructure.api.routes.history_routes import router as history_router
from complexcalc.infrastructure.api.routes.memory_routes import router as memory_router


def create_app() -> FastAPI:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title="ComplexCalc Backend",
        version="0.1.0",
        description="""
        ## ComplexCalc Backend API

        Complex-number calculator core with an undo/redo history that can be
        exported, imported, saved and loaded in a plain text format.

        ### Features
        - **Arithmetic**: addition, subtraction, multiplication, division,
          conjugate, absolute value, square, root and inverse over complex numbers
        - **History**: every successful calculation is recorded; undo/redo move a
          cursor over the log without changing it
        - **Persistence**: `AdditionOperation:3+2i,2+3i,1+-1i;ConjugateOperation:2+-3i,2+3i`
        - **Memory**: MS / MR / M+ / MC register
        - **Shapes**: circle and equilateral triangle measurements

        ### Authentication
        All endpoints (except root and health) require a Bearer token; each
        user gets their own calculator session:
        ```
        Authorization: Bearer your-jwt-token
        ```

        ### Error Responses
        - **400 Bad Request**: Division by zero, missing operand, unknown operation or malformed history
        - **401 Unauthorized**: Missing or invalid authentication token
        - **404 Not Found**: History index out of range
        - **422 Unprocessable Entity**: Validation error in request body
        - **500 Internal Server Error**: History storage could not be read or written
        """,
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )
    add_default_middlewares(app)

    @app.get(
        "/",
        response_model=RootResponse,
        summary="API Root",
        description="Get basic information about the ComplexCalc API",
        response_description="API information including status and version",
    )
    def root():
        """Get API root information."""
        return RootResponse(status="ok", service="complexcalc", version=app.version)

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check if the API service is running and healthy",
        response_description="Health status of the API service",
    )
    def health():
        """Check API health status."""
        return HealthResponse(status="healthy")

    app.include_router(calculator_router)
    app.include_router(history_router)
    app.include_router(memory_router)
    return app


app = create_app()
