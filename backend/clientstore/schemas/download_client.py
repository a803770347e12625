"""
Download client records and the settings blob codec.

Records are frozen: the repository cache hands out shared instances, so
callers derive changed copies with `model_copy(update=...)`.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from clientstore.exceptions import SettingsDecodeError


class DownloadClientType(str, Enum):
    """Protocol spoken by the download client."""
    QBITTORRENT = "qbittorrent"
    DELUGE_V1 = "deluge_v1"
    DELUGE_V2 = "deluge_v2"
    RTORRENT = "rtorrent"
    TRANSMISSION = "transmission"
    PORLA = "porla"
    RADARR = "radarr"
    SONARR = "sonarr"
    LIDARR = "lidarr"
    WHISPARR = "whisparr"
    READARR = "readarr"
    SABNZBD = "sabnzbd"


class BasicAuth(BaseModel):
    """HTTP basic auth in front of the client's web API."""
    model_config = ConfigDict(frozen=True)

    auth: bool = False
    username: str = ""
    password: str = ""


class DownloadClientRules(BaseModel):
    """Client-side rules checked before an action pushes a release.

    Unknown keys are kept so rules written by newer versions survive a
    read/write cycle.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    enabled: bool = False
    max_active_downloads: int = 0
    ignore_slow_torrents: bool = False
    ignore_slow_torrents_condition: str = ""
    download_speed_threshold: int = 0
    upload_speed_threshold: int = 0


class DownloadClientSettings(BaseModel):
    """Settings persisted as a JSON blob in the client row."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: Optional[str] = Field(None, alias="apikey")
    basic: Optional[BasicAuth] = None
    rules: DownloadClientRules = Field(default_factory=DownloadClientRules)


class DownloadClientIn(BaseModel):
    """Download client fields accepted from callers (no id)."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: DownloadClientType
    enabled: bool = False
    host: str = ""
    port: int = Field(0, ge=0, le=65535)
    tls: bool = False
    tls_skip_verify: bool = False
    username: str = ""
    password: str = ""
    settings: DownloadClientSettings = Field(default_factory=DownloadClientSettings)


class DownloadClient(DownloadClientIn):
    """Download client configuration record."""

    id: int = Field(0, description="Assigned by the store on creation")


def encode_settings(settings: DownloadClientSettings) -> str:
    """Serialize settings to the blob stored in `client.settings`."""
    return settings.model_dump_json(by_alias=True)


def decode_settings(blob: Optional[str]) -> DownloadClientSettings:
    """
    Parse a settings blob.

    An empty blob means "no settings" and is never handed to the parser.

    Raises:
        SettingsDecodeError: Blob is not a valid settings document
    """
    if not blob:
        return DownloadClientSettings()

    try:
        return DownloadClientSettings.model_validate_json(blob)
    except ValidationError as e:
        raise SettingsDecodeError(f"could not decode download client settings: {blob!r}") from e
