"""Request dependencies for the services attached to the app.

Usage in routes:
    from pdfdrop.deps import get_store

    @router.get("/items")
    async def list_items(store: MetadataStore = Depends(get_store)):
        return await store.load()
"""
from fastapi import Request

from pdfdrop.config import Settings
from pdfdrop.services.file_storage import FileStorageService
from pdfdrop.services.metadata_store import MetadataStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> MetadataStore:
    """FastAPI dependency that returns the process-wide metadata store."""
    return request.app.state.store


def get_file_storage(request: Request) -> FileStorageService:
    return request.app.state.file_storage
