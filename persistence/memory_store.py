from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from .errors import InvalidIdentifierError
from .identifiers import check_id, is_valid_id, new_id
from .interfaces import Document, DocumentStore

logger = logging.getLogger(__name__)


def _empty_like(value: Any) -> dict[str, Any] | list[Any] | None:
    if isinstance(value, dict):
        return {}
    if isinstance(value, (list, tuple)):
        return [None] * len(value)
    return None


def copy_document(doc: Mapping[str, Any]) -> Document:
    """
    Copy a JSON-like document using an explicit stack.

    Nesting depth is bounded only by memory, never by the interpreter's
    recursion limit. Scalars are shared since they are immutable.
    """
    root: Document = {}
    pending: list[tuple[Any, Any]] = [(doc, root)]
    while pending:
        src, dst = pending.pop()
        items = src.items() if isinstance(src, dict) else enumerate(src)
        for key, value in items:
            child = _empty_like(value)
            if child is None:
                dst[key] = value
            else:
                dst[key] = child
                pending.append((value, child))
    return root


class InMemoryDocumentStore(DocumentStore):
    """
    Holds every document in a dict guarded by one lock for the whole store.

    - Validation always happens before mutation, under the same lock.
    - Stored documents are never mutated in place; replace swaps the whole
      value. Copies are therefore made outside the lock, on the way in and
      on the way out, and the lock only covers dict operations.
    """

    def __init__(self, initial: Mapping[str, Mapping[str, Any]] | None = None) -> None:
        self._lock = threading.Lock()
        self._docs: dict[str, Document] = {}
        for resource_id, doc in (initial or {}).items():
            if not is_valid_id(resource_id):
                raise InvalidIdentifierError(resource_id)
            self._docs[resource_id] = copy_document(doc)

    def list(self) -> dict[str, Document]:
        with self._lock:
            snapshot = dict(self._docs)
        return {resource_id: copy_document(doc) for resource_id, doc in snapshot.items()}

    def get(self, resource_id: str) -> Document:
        with self._lock:
            check_id(resource_id, self._docs)
            doc = self._docs[resource_id]
        return copy_document(doc)

    def check(self, resource_id: str) -> None:
        with self._lock:
            check_id(resource_id, self._docs)

    def create(self, doc: Document) -> str:
        stored = copy_document(doc)
        with self._lock:
            resource_id = new_id(self._docs)
            self._docs[resource_id] = stored
        logger.debug("stored new document %s (%d fields)", resource_id, len(stored))
        return resource_id

    def replace(self, resource_id: str, doc: Document) -> Document:
        stored = copy_document(doc)
        with self._lock:
            check_id(resource_id, self._docs)
            self._docs[resource_id] = stored
        return copy_document(stored)

    def remove(self, resource_id: str) -> None:
        with self._lock:
            check_id(resource_id, self._docs)
            del self._docs[resource_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)
