"""
Main FastAPI application for Clientstore.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from clientstore import __version__
from clientstore.config import settings
from clientstore.database import engine, init_db, close_db, ping_db
from clientstore.repositories import DownloadClientRepository
from clientstore.utils.logger import setup_logger
from clientstore.api import register_exception_handlers, download_clients


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager."""
    # Startup
    setup_logger()
    logger.info("Starting Clientstore...")

    await init_db(engine)
    logger.info("Database initialized")

    app.state.download_client_repo = DownloadClientRepository(
        engine,
        cache_storage_hits=settings.cache_storage_hits,
        isolation_level=settings.delete_isolation_level,
    )

    logger.info("Clientstore started successfully")

    yield

    # Shutdown
    logger.info("Shutting down Clientstore...")
    await close_db(engine)
    logger.info("Clientstore shut down complete")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Download client configuration store",
    version=__version__,
    lifespan=lifespan
)

register_exception_handlers(app)

# Include routers
app.include_router(download_clients.router)


@app.get("/api/status/live")
async def liveness_check():
    """
    Liveness probe - checks if the process is alive.
    Should return 200 if the app is running, regardless of dependencies.
    """
    return {"status": "alive", "version": __version__}


@app.get("/api/status/ready")
async def readiness_check(request: Request):
    """
    Readiness probe - checks database connectivity and that the
    repository has been created.
    """
    repo = getattr(request.app.state, "download_client_repo", None)
    checks = {
        "database": await ping_db(repo.engine if repo else engine),
        "repository": repo is not None,
    }

    if all(checks.values()):
        return {"status": "ready", "checks": checks}
    return JSONResponse(status_code=503, content={"status": "not_ready", "checks": checks})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
