import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.bootstrap import bootstrap_app
from app.core.config import settings
from app.core.middlewares import SECURITY_HEADERS, security_headers_middleware, request_logging_middleware
from app.core.models.exceptions import AddressLookupError, InternalLookupError
from app.core.services import get_http_client_manager

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handles application startup and shutdown events, ensuring the HTTP client
    pool used for directory lookups is initialized and cleaned up properly.
    """
    logger.info("Starting application...")

    manager = get_http_client_manager()
    logger.info("Initializing HTTP Client Pool...")
    await manager.initialize()
    logger.info("HTTP Client initialized.")

    yield

    logger.info("Shutting down application...")

    logger.info("Closing HTTP Client Pool...")
    await manager.close()


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
    max_age=600,  # Cache preflight requests for 10 minutes
)


@app.exception_handler(AddressLookupError)
async def address_lookup_exception_handler(request: Request, exc: AddressLookupError):
    """Render lookup failures as ``{"error": <message>}`` with the failure's status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unknown routes and disallowed methods use the same ``{"error": ...}`` body as lookups."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler. The client only ever sees a generic message;
    details stay in the server log.
    """
    logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": InternalLookupError.message},
        # Rendered by ServerErrorMiddleware, outside security_headers_middleware
        headers=SECURITY_HEADERS,
    )

# Security headers middleware
app.middleware("http")(security_headers_middleware)

# Request logging middleware
app.middleware("http")(request_logging_middleware)


bootstrap_app(app)


# Health check endpoint (useful for monitoring)
@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0",
                port=8000,
                log_level="info"
        )
