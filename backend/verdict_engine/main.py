import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from . import __version__
from .config import DEBUG, HOST, PORT, configure_logging
from .routes.viability import router as viability_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    # Startup
    configure_logging()
    logger.info("Starting Viability Verdict Engine v%s", __version__)
    logger.info("   Debug mode: %s", "on" if DEBUG else "off")

    yield

    logger.info("Shutting down Viability Verdict Engine")


app = FastAPI(
    title="Viability Verdict Engine",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.include_router(viability_router)


@app.get(
    "/",
    summary="API Root",
    description="Welcome endpoint with API information",
    tags=["General"]
)
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Viability Verdict Engine",
        "version": __version__,
        "description": "Deterministic idea-viability scoring",
        "docs": "/docs",
        "endpoints": {
            "viability": "POST /viability - Full four-dimension verdict",
            "viability_mvp": "POST /viability/mvp - Legacy pain + competition verdict",
            "health": "GET /health - Service health check"
        }
    }


@app.get(
    "/health",
    summary="Global Health Check",
    description="Check if the API server is running",
    tags=["General"]
)
async def health():
    """Global health check endpoint."""
    return {
        "status": "healthy",
        "service": "viability-verdict-engine",
        "version": __version__
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "detail": str(exc) if DEBUG else "An unexpected error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "verdict_engine.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )
