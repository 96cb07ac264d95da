import sys
import time
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api import v1_router
from src.api.health import health_router
from src.config.config import config
from src.utils.logging_config import setup_logging

# Configure logging
setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    The agent and lookup services are stateless singletons built at import
    time, so there is nothing to start or stop beyond logging the event.
    """
    logger.info(
        "Starting Tourism Agent application",
        environment=config.environment,
        lookup_timeout_seconds=config.lookup_timeout_seconds,
    )
    yield
    logger.info("Shutting down Tourism Agent")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title="Tourism Agent API",
        description="""
        ## Tourism Agent API

        Ask a free-text travel question and get the current weather and/or
        nearby points of interest for the place it mentions.

        ### Features:
        - **Query analysis**: place and intent extraction from plain sentences
        - **Weather**: current temperature and chance of rain (Open-Meteo)
        - **Places**: up to five attractions, historic sites or parks (OpenStreetMap)

        ### Authentication:
        If an API token is configured, include it as a Bearer token in the Authorization header.

        ### Example Queries:
        - "I'm going to Bangalore, let's plan my trip"
        - "What's the temperature in Paris?"
        - "Visit Tokyo"
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Configure CORS so a browser front end can call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
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
            url=str(request.url),
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            logger.info(
                "HTTP request completed",
                method=request.method,
                url=str(request.url),
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
                url=str(request.url),
                error=str(e),
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
            url=str(request.url),
            error=str(exc),
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please try again later.",
                "timestamp": time.time(),
            },
        )

    # HTTP exception handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent formatting."""
        logger.warning(
            "HTTP exception",
            method=request.method,
            url=str(request.url),
            status_code=exc.status_code,
            detail=exc.detail,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "status_code": exc.status_code, "timestamp": time.time()},
            headers=getattr(exc, "headers", None),
        )

    app.include_router(health_router)
    app.include_router(v1_router)

    # Root endpoint (hide from swagger)
    @app.get("/", tags=["Root"], include_in_schema=False)
    async def root():
        """Root endpoint providing basic system information."""
        return {
            "message": "Tourism Agent API",
            "version": "1.0.0",
            "status": "running",
            "timestamp": time.time(),
            "docs": "/docs",
            "redoc": "/redoc",
        }

    return app


# Create the application instance
app = create_app()


def main():
    logger.info(
        f"Starting Tourism Agent server in {config.environment} environment",
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
