from __future__ import annotations

from typing import Any, Protocol

Document = dict[str, Any]


class DocumentStore(Protocol):
    """
    Minimal DB-friendly interface: JSON-like documents keyed by UUID strings.

    Implementations serialize all access; lookups on a malformed id raise
    InvalidIdentifierError, lookups on an absent id raise ResourceNotFoundError.
    """

    def list(self) -> dict[str, Document]:
        """Return a snapshot of every entry (empty dict when the store is empty)."""
        ...

    def get(self, resource_id: str) -> Document:
        ...

    def check(self, resource_id: str) -> None:
        """Raise unless `resource_id` is well-formed and present."""
        ...

    def create(self, doc: Document) -> str:
        """Store `doc` under a freshly generated id and return that id."""
        ...

    def replace(self, resource_id: str, doc: Document) -> Document:
        ...

    def remove(self, resource_id: str) -> None:
        ...

    def __len__(self) -> int:
        ...
