"""
Leads Backend - FastAPI application served behind the path normalizer
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.config import configure_logging, get_settings
from backend.health import root_response

SERVICE_NAME = "Leads Backend API"
VERSION = "1.0.0"

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info(f"Starting {SERVICE_NAME}...")
    yield
    logger.info(f"Shutting down {SERVICE_NAME}...")


settings = get_settings()
prefix = settings.api_prefix

# Initialize FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    version=VERSION,
    docs_url=f"{prefix}/docs",
    redoc_url=None,
    openapi_url=f"{prefix}/openapi.json",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Same payload as backend.health.root_app, whichever rewrite catches "/"
@app.get(prefix)
async def root():
    return root_response()


@app.get(f"{prefix}/health")
async def health_check():
    """Detailed health check"""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": VERSION,
        "environment": settings.python_env,
    }


if __name__ == "__main__":
    import uvicorn

    from backend.path_normalizer import MountPrefixMiddleware

    # Local run with the same prefix handling as the serverless entry point
    uvicorn.run(
        MountPrefixMiddleware(app, prefix=prefix),
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
