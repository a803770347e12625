"""
Helpers shared by the test modules.
"""
from sqlalchemy import insert, select

from clientstore.models import Action, Client
from clientstore.schemas import DownloadClient, DownloadClientType


def make_client(name="qbit1", client_type=DownloadClientType.QBITTORRENT, host="127.0.0.1",
                port=8080, enabled=True, **fields) -> DownloadClient:
    """Build a download client record for tests."""
    return DownloadClient(
        name=name,
        type=client_type,
        host=host,
        port=port,
        enabled=enabled,
        **fields
    )


async def insert_action(engine, filter_id: int, client_id: int, enabled: bool = True) -> int:
    """Insert an action row and return its id."""
    async with engine.begin() as conn:
        result = await conn.execute(
            insert(Action).values(
                name=f"action-{filter_id}",
                type="QBITTORRENT",
                enabled=enabled,
                filter_id=filter_id,
                client_id=client_id,
            ).returning(Action.id)
        )
        return result.scalar_one()


async def fetch_actions(engine) -> dict:
    """Map action id -> (filter_id, client_id, enabled)."""
    async with engine.connect() as conn:
        result = await conn.execute(
            select(Action.id, Action.filter_id, Action.client_id, Action.enabled)
        )
        return {row.id: (row.filter_id, row.client_id, row.enabled) for row in result}


async def insert_raw_client(engine, settings_blob: str, name="raw", client_type="qbittorrent") -> int:
    """Insert a client row directly, bypassing the settings encoder."""
    async with engine.begin() as conn:
        result = await conn.execute(
            insert(Client).values(
                name=name,
                type=client_type,
                enabled=True,
                host="localhost",
                port=8080,
                tls=False,
                tls_skip_verify=False,
                username="",
                password="",
                settings=settings_blob,
            ).returning(Client.id)
        )
        return result.scalar_one()


async def count_clients(engine) -> int:
    async with engine.connect() as conn:
        result = await conn.execute(select(Client.id))
        return len(result.all())
