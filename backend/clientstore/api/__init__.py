"""
API routes for Clientstore.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from clientstore.exceptions import DownloadClientError, DownloadClientNotFoundError
from clientstore.utils.errors import create_error_response, status_for


def register_exception_handlers(app: FastAPI):
    """Map download client exceptions to standardized error responses."""

    @app.exception_handler(DownloadClientNotFoundError)
    async def handle_not_found(request: Request, exc: DownloadClientNotFoundError):
        return JSONResponse(
            status_code=status_for(exc.code),
            content={"detail": create_error_response(exc.code, f"Download client {exc.client_id} not found")},
        )

    @app.exception_handler(DownloadClientError)
    async def handle_download_client_error(request: Request, exc: DownloadClientError):
        # Log the full error, return a generic message
        logger.error(f"Error ({exc.operation} {request.url.path}): {type(exc).__name__}: {exc}")
        return JSONResponse(
            status_code=status_for(exc.code),
            content={"detail": create_error_response(exc.code, "Failed to access download clients. Please check logs for details.")},
        )
