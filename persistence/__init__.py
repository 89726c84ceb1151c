from __future__ import annotations

from .errors import (
    IdentifierGenerationError,
    InvalidIdentifierError,
    ResourceNotFoundError,
    StoreError,
)
from .identifiers import check_id, is_valid_id
from .interfaces import Document, DocumentStore
from .memory_store import InMemoryDocumentStore
from .repositories import AsyncResourceRepository, ThreadedResourceRepository

__all__ = [
    "Document",
    "DocumentStore",
    "InMemoryDocumentStore",
    "AsyncResourceRepository",
    "ThreadedResourceRepository",
    "StoreError",
    "InvalidIdentifierError",
    "ResourceNotFoundError",
    "IdentifierGenerationError",
    "check_id",
    "is_valid_id",
]
