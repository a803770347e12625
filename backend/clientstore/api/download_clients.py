"""
Download client API routes.
"""
from typing import List
from fastapi import APIRouter, Depends, Request, Response, status

from clientstore.repositories import DownloadClientRepository
from clientstore.schemas import DownloadClient, DownloadClientIn

router = APIRouter(prefix="/api/download_clients", tags=["download_clients"])


def get_repository(request: Request) -> DownloadClientRepository:
    """Repository created at startup."""
    return request.app.state.download_client_repo


@router.get("", response_model=List[DownloadClient])
async def list_download_clients(repo: DownloadClientRepository = Depends(get_repository)):
    """Get all configured download clients."""
    return await repo.list()


@router.get("/{client_id}", response_model=DownloadClient)
async def get_download_client(client_id: int, repo: DownloadClientRepository = Depends(get_repository)):
    """Get a single download client."""
    return await repo.find_by_id(client_id)


@router.post("", response_model=DownloadClient, status_code=status.HTTP_201_CREATED)
async def create_download_client(
    body: DownloadClientIn,
    repo: DownloadClientRepository = Depends(get_repository),
):
    """
    Add a new download client.

    The id is assigned by the store.
    """
    return await repo.store(DownloadClient(**dict(body)))


@router.put("/{client_id}", response_model=DownloadClient)
async def update_download_client(
    client_id: int,
    body: DownloadClientIn,
    repo: DownloadClientRepository = Depends(get_repository),
):
    """Replace every field of a download client."""
    return await repo.update(DownloadClient(id=client_id, **dict(body)))


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_download_client(client_id: int, repo: DownloadClientRepository = Depends(get_repository)):
    """
    Delete a download client.

    Actions using it are disabled and detached.
    """
    await repo.delete(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
