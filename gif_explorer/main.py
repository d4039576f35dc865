"""
GIF Explorer - Relay Service
FastAPI application proxying Giphy trending/search with a server-held key
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from .config import settings
from .exceptions import RelayError
from .infrastructure.giphy_client import giphy_client
from .api.routes import gifs

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
# httpx logs full request URLs at INFO, and the Giphy key is a query parameter
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info("Starting GIF Explorer relay...")
    await giphy_client.start()
    logger.info(f"Server running on port {settings.PORT}")

    yield

    # Shutdown
    logger.info("Shutting down GIF Explorer relay...")
    await giphy_client.stop()


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Relay for Giphy trending and search that keeps the API key server-side",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION
    }


app.include_router(gifs.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gif_explorer.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
