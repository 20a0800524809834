"""
FastAPI application for FinCalc.

Provides REST API endpoints for:
- Mortgage payments and amortization
- Car finance (HP / PCP)
- Pension projection
- Purchasing power
"""

import os
import traceback
from typing import Dict, Any

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fincalc import __version__
from fincalc.api.routes import mortgage, car_finance, pension, purchasing_power
from fincalc.api.schemas import ErrorResponse
from fincalc.utils.error_utils import logger, FinancialCalculatorError, InvalidInputError


# Create FastAPI application
app = FastAPI(
    title="FinCalc API",
    description="Personal finance calculators - mortgage, car finance, pension and purchasing power",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# CORS configuration for the frontend
_default_origins = "http://localhost:3000,http://localhost:5173"
_cors_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", _default_origins).split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    """Calculator refused the inputs."""
    logger.info(f"Rejected input on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "Invalid input",
            "detail": exc.message,
            "type": type(exc).__name__,
            "field": exc.field,
        },
    )


@app.exception_handler(FinancialCalculatorError)
async def calculator_error_handler(request: Request, exc: FinancialCalculatorError):
    """Calculation failed unexpectedly."""
    logger.error(f"Calculation failed on {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Calculation failed",
            "detail": exc.message,
            "type": type(exc).__name__,
        },
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {type(exc).__name__}: {exc}")
    logger.error(traceback.format_exc())
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "type": type(exc).__name__,
        },
    )


# Health check endpoint
@app.get("/health")
async def health_check() -> Dict[str, str]:
    """API health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "service": "fincalc-api",
    }


# Error bodies produced by the exception handlers above
_error_responses = {
    422: {"model": ErrorResponse, "description": "Invalid input"},
    500: {"model": ErrorResponse, "description": "Calculation failed"},
}

# Include routers
app.include_router(mortgage.router, prefix="/api/mortgage", tags=["Mortgage"], responses=_error_responses)
app.include_router(car_finance.router, prefix="/api/car-finance", tags=["Car Finance"], responses=_error_responses)
app.include_router(pension.router, prefix="/api/pension", tags=["Pension"], responses=_error_responses)
app.include_router(
    purchasing_power.router, prefix="/api/purchasing-power", tags=["Purchasing Power"], responses=_error_responses
)


# Root endpoint
@app.get("/")
async def root() -> Dict[str, Any]:
    """API root endpoint with service information."""
    return {
        "service": "FinCalc API",
        "version": __version__,
        "docs": "/api/docs",
        "health": "/health",
        "calculators": ["mortgage", "car-finance", "pension", "purchasing-power"],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "fincalc.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
