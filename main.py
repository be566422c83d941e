import sys
import time
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api import api_router
from src.api.health import health_router
from src.config.config import config
from src.services.weather_service import weather_service
from src.utils.logging_config import setup_logging

# Configure logging
setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    The proxy keeps no state between requests; startup only records which
    upstream endpoints are in use.
    """
    logger.info(
        "Starting Weather Proxy application",
        environment=config.environment,
        geocoding_url=weather_service.geocoding_url,
        onecall_url=weather_service.onecall_url,
        units=weather_service.units,
    )
    app.state.weather_service = weather_service

    yield

    logger.info("Shutting down Weather Proxy")


def _error_content(error, status_code: int) -> dict:
    return {"error": error, "status_code": status_code, "timestamp": time.time()}


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Weather Proxy API",
        description="""
        ## Weather Proxy API

        Forwards city weather lookups to OpenWeatherMap, attaching the
        provider API key server-side so clients never hold it.

        ### Usage:
        `POST /api/weather` with `{"city": "New York", "country_code": "US"}`.
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Request logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing information."""
        start_time = time.time()

        logger.info(
            "HTTP request started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                process_time=process_time,
            )

            response.headers["X-Process-Time"] = str(process_time)
            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "HTTP request failed",
                method=request.method,
                path=request.url.path,
                error_type=type(e).__name__,
                process_time=process_time,
            )
            raise

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions globally."""
        logger.error(
            "Unhandled exception",
            method=request.method,
            path=request.url.path,
            error_type=type(exc).__name__,
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_content(
                "Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR
            ),
        )

    # HTTP exception handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent formatting."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            path=request.url.path,
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content(exc.detail, exc.status_code),
        )

    # Request validation handler
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Reject malformed bodies with 400 and a field-level summary."""
        errors = [
            {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
            for error in exc.errors()
        ]
        logger.warning(
            "Invalid request",
            method=request.method,
            path=request.url.path,
            errors=errors,
        )

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_content(errors, status.HTTP_400_BAD_REQUEST),
        )

    # Include API routes
    app.include_router(health_router)
    app.include_router(api_router)

    # Root endpoint (hide from swagger)
    @app.get("/", tags=["Root"], include_in_schema=False, response_class=PlainTextResponse)
    async def root():
        """Root endpoint describing how to use the proxy."""
        return "Weather Proxy Server is running! Use POST /api/weather to get weather data."

    return app


# Create the application instance
app = create_app()


def main():
    logger.info(
        f"Starting Weather Proxy server in {config.environment} environment",
        host=config.api_host,
        port=config.api_port,
    )

    try:
        uvicorn.run(
            app,
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower(),
            access_log=True,
            server_header=False,
            date_header=False,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
