from __future__ import annotations

import asyncio
from typing import Protocol

from .interfaces import Document, DocumentStore


class AsyncResourceRepository(Protocol):
    async def list_resources(self) -> dict[str, Document]: ...
    async def get_resource(self, resource_id: str) -> Document: ...
    async def check_resource(self, resource_id: str) -> None: ...
    async def create_resource(self, doc: Document) -> str: ...
    async def replace_resource(self, resource_id: str, doc: Document) -> Document: ...
    async def delete_resource(self, resource_id: str) -> None: ...


class ThreadedResourceRepository(AsyncResourceRepository):
    """
    Async wrapper around a blocking DocumentStore.
    Uses asyncio.to_thread so lock waits never block the event loop.
    """

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    @property
    def store(self) -> DocumentStore:
        return self._store

    async def list_resources(self) -> dict[str, Document]:
        return await asyncio.to_thread(self._store.list)

    async def get_resource(self, resource_id: str) -> Document:
        return await asyncio.to_thread(self._store.get, resource_id)

    async def check_resource(self, resource_id: str) -> None:
        await asyncio.to_thread(self._store.check, resource_id)

    async def create_resource(self, doc: Document) -> str:
        return await asyncio.to_thread(self._store.create, doc)

    async def replace_resource(self, resource_id: str, doc: Document) -> Document:
        return await asyncio.to_thread(self._store.replace, resource_id, doc)

    async def delete_resource(self, resource_id: str) -> None:
        await asyncio.to_thread(self._store.remove, resource_id)
