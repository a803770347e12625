"""
Utility modules for Clientstore.
"""
from clientstore.utils.logger import setup_logger
from clientstore.utils.errors import ErrorCode, create_error_response, status_for

__all__ = [
    "setup_logger",
    "ErrorCode",
    "create_error_response",
    "status_for",
]
