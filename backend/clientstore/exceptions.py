"""
Clientstore - custom exceptions.

Route handlers map these to HTTP responses through the handlers
registered in `clientstore.api.register_exception_handlers`.
"""
from typing import Any, List, Optional

from clientstore.utils.errors import ErrorCode


class DownloadClientError(Exception):
    """Base exception for download client operations."""

    code = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, operation: str = "", client_id: Optional[int] = None):
        self.message = message
        self.operation = operation
        self.client_id = client_id
        super().__init__(message)


class DownloadClientStorageError(DownloadClientError):
    """Query build or execution failed."""

    code = ErrorCode.DATABASE_ERROR

    def __init__(
        self,
        message: str,
        operation: str = "",
        client_id: Optional[int] = None,
        partial: Optional[List[Any]] = None,
    ):
        super().__init__(message, operation, client_id)
        # Rows read before the failure (list only); not reliable
        self.partial = partial if partial is not None else []


class SettingsDecodeError(DownloadClientStorageError):
    """Persisted settings blob is not valid."""


class DownloadClientNotFoundError(DownloadClientError):
    """No download client with the requested id."""

    code = ErrorCode.NOT_FOUND


class NoRowsAffectedError(DownloadClientNotFoundError):
    """Delete matched no client row."""
