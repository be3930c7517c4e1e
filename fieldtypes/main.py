# ABOUTME: FastAPI application entry point
# ABOUTME: Configures app, logging, registers routers, and sets up middleware

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from fieldtypes.api import fields, health
from fieldtypes.config import get_settings
from fieldtypes.middleware.logging import RequestLoggingMiddleware

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="Field Type Detector",
    description="Infers semantic field types (quantitative, nominal, ordinal, temporal) for chart encoding",
    version="0.1.0",
)

# Add middleware
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Custom exception handler to format error responses."""
    # If detail is a dict, use it directly (for our custom error format)
    if isinstance(exc.detail, dict):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail
        )
    # Otherwise, wrap it in standard format
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": "ERROR", "message": exc.detail}
    )


# Register routers
app.include_router(health.router)
app.include_router(fields.router)
