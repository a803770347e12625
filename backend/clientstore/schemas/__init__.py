"""
Domain records for Clientstore.
"""
from clientstore.schemas.download_client import (
    DownloadClientType,
    BasicAuth,
    DownloadClientRules,
    DownloadClientSettings,
    DownloadClient,
    DownloadClientIn,
    encode_settings,
    decode_settings,
)

__all__ = [
    "DownloadClientType",
    "BasicAuth",
    "DownloadClientRules",
    "DownloadClientSettings",
    "DownloadClient",
    "DownloadClientIn",
    "encode_settings",
    "decode_settings",
]
