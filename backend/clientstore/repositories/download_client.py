"""
Download client repository.

Reads and writes the `client` table through an async engine and keeps a
per-repository cache of clients by id. Only `find_by_id` reads the cache;
every write goes to the database first and then updates the cache.
"""
from typing import List, Optional
from loguru import logger
from pydantic import ValidationError
from sqlalchemy import select, insert, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from clientstore.constants import NO_CLIENT_ID
from clientstore.database import delete_isolation_level
from clientstore.exceptions import (
    DownloadClientError,
    DownloadClientStorageError,
    DownloadClientNotFoundError,
    NoRowsAffectedError,
)
from clientstore.models import Client, Action
from clientstore.repositories.client_cache import ClientCache
from clientstore.schemas import DownloadClient, encode_settings, decode_settings

CLIENT_COLUMNS = (
    Client.id,
    Client.name,
    Client.type,
    Client.enabled,
    Client.host,
    Client.port,
    Client.tls,
    Client.tls_skip_verify,
    Client.username,
    Client.password,
    Client.settings,
)


def _row_to_client(row, operation: str) -> DownloadClient:
    """Build a record from a selected row, decoding its settings blob."""
    try:
        settings = decode_settings(row.settings)
    except DownloadClientStorageError as e:
        e.operation = operation
        e.client_id = row.id
        raise

    try:
        return DownloadClient(
            id=row.id,
            name=row.name,
            type=row.type,
            enabled=row.enabled,
            host=row.host,
            port=row.port,
            tls=row.tls,
            tls_skip_verify=row.tls_skip_verify,
            username=row.username or "",
            password=row.password or "",
            settings=settings,
        )
    except ValidationError as e:
        raise DownloadClientStorageError(
            f"invalid download client row: {row.id}", operation, row.id
        ) from e


def _column_values(client: DownloadClient, operation: str) -> dict:
    """Column values for insert/update, settings encoded to the blob."""
    try:
        blob = encode_settings(client.settings)
    except ValueError as e:
        raise DownloadClientStorageError(
            f"error encoding download client settings: {e}", operation, client.id or None
        ) from e

    return {
        "name": client.name,
        "type": client.type.value,
        "enabled": client.enabled,
        "host": client.host,
        "port": client.port,
        "tls": client.tls,
        "tls_skip_verify": client.tls_skip_verify,
        "username": client.username,
        "password": client.password,
        "settings": blob,
    }


class DownloadClientRepository:
    """CRUD for download clients with an id-keyed cache."""

    def __init__(
        self,
        engine: AsyncEngine,
        cache: Optional[ClientCache] = None,
        cache_storage_hits: bool = False,
        isolation_level: Optional[str] = None,
    ):
        """
        Args:
            engine: Async engine for the database holding `client` and `action`
            cache: Cache to use (a new one is created when omitted)
            cache_storage_hits: Also cache clients that `find_by_id` read from storage
            isolation_level: Override for the delete transaction isolation level
        """
        self.engine = engine
        self.cache = cache if cache is not None else ClientCache()
        self.cache_storage_hits = cache_storage_hits
        self.isolation_level = delete_isolation_level(engine, isolation_level)
        self.log = logger.bind(repo="download_client")

    async def list(self) -> List[DownloadClient]:
        """
        All download clients in storage order. Never touches the cache.

        Raises:
            DownloadClientStorageError: Query failed, or a row could not be
                decoded (rows read so far are on `.partial`)
        """
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(select(*CLIENT_COLUMNS))
                rows = result.all()
        except SQLAlchemyError as e:
            raise DownloadClientStorageError(f"error executing query: {e}", "list") from e

        clients: List[DownloadClient] = []
        for row in rows:
            try:
                clients.append(_row_to_client(row, "list"))
            except DownloadClientStorageError as e:
                e.partial = clients
                raise

        return clients

    async def find_by_id(self, client_id: int) -> DownloadClient:
        """
        Download client by id, from the cache when present.

        Raises:
            DownloadClientNotFoundError: No client with this id
            DownloadClientStorageError: Query or settings decode failed
        """
        client = self.cache.get(client_id)
        if client is not None:
            return client

        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(
                    select(*CLIENT_COLUMNS).where(Client.id == client_id)
                )
                row = result.one_or_none()
        except SQLAlchemyError as e:
            raise DownloadClientStorageError(
                f"error executing query: {e}", "find_by_id", client_id
            ) from e

        if row is None:
            raise DownloadClientNotFoundError("no client configured", "find_by_id", client_id)

        client = _row_to_client(row, "find_by_id")

        if self.cache_storage_hits:
            self.cache.set(client.id, client)

        return client

    async def store(self, client: DownloadClient) -> DownloadClient:
        """
        Insert a new download client.

        Any id on the incoming record is ignored; the returned copy carries
        the id assigned by the database and is cached.
        """
        values = _column_values(client, "store")

        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(
                    insert(Client).values(**values).returning(Client.id)
                )
                client_id = result.scalar_one()
        except SQLAlchemyError as e:
            raise DownloadClientStorageError(f"error executing query: {e}", "store") from e

        stored = client.model_copy(update={"id": client_id})

        self.log.debug(f"download_client.store: {client_id}")

        self.cache.set(client_id, stored)

        return stored

    async def update(self, client: DownloadClient) -> DownloadClient:
        """
        Overwrite every column of the client row with `client.id`.

        The id is not checked for existence: zero affected rows is logged,
        and the record is cached regardless.
        """
        values = _column_values(client, "update")

        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(
                    update(Client).where(Client.id == client.id).values(**values)
                )
                rows_affected = result.rowcount
        except SQLAlchemyError as e:
            raise DownloadClientStorageError(
                f"error executing query: {e}", "update", client.id
            ) from e

        if rows_affected == 0:
            self.log.warning(f"download_client.update: no client with id {client.id}")

        self.log.debug(f"download_client.update: {client.id}")

        self.cache.set(client.id, client)

        return client

    async def delete(self, client_id: int) -> None:
        """
        Delete a download client and detach it from every action.

        Both statements run in one transaction; any failure rolls back
        both. The cache entry is dropped as soon as the client row delete
        runs, and is not restored on rollback.

        Raises:
            NoRowsAffectedError: No client with this id
            DownloadClientStorageError: A statement or the commit failed
        """
        try:
            async with self.engine.connect() as conn:
                conn = await conn.execution_options(isolation_level=self.isolation_level)
                async with conn.begin():
                    await self._delete(conn, client_id)
                    await self._detach_from_actions(conn, client_id)
        except DownloadClientError:
            raise
        except SQLAlchemyError as e:
            raise DownloadClientStorageError(
                f"error deleting download client: {client_id}: {e}", "delete", client_id
            ) from e

        self.log.info(f"delete download client: {client_id}")

    async def _delete(self, conn: AsyncConnection, client_id: int) -> None:
        result = await conn.execute(delete(Client).where(Client.id == client_id))

        self.cache.pop(client_id)

        if result.rowcount == 0:
            raise NoRowsAffectedError(
                f"error deleting download client: {client_id}: no rows affected", "delete", client_id
            )

        self.log.debug(f"delete download client: {client_id}")

    async def _detach_from_actions(self, conn: AsyncConnection, client_id: int) -> None:
        """Disable actions that use the client and clear their client_id."""
        result = await conn.execute(
            update(Action)
            .where(Action.client_id == client_id)
            .values(enabled=False, client_id=NO_CLIENT_ID)
            .returning(Action.filter_id)
        )

        for filter_id in result.scalars().all():
            self.log.debug(f"deleting download client {client_id} from action for filter {filter_id}")
