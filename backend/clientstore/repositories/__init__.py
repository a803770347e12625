"""
Repositories for Clientstore.
"""
from clientstore.repositories.client_cache import ClientCache
from clientstore.repositories.download_client import DownloadClientRepository

__all__ = [
    "ClientCache",
    "DownloadClientRepository",
]
