from __future__ import annotations


class StoreError(Exception):
    """Base class for document store failures."""


class InvalidIdentifierError(StoreError):
    def __init__(self, resource_id: str):
        super().__init__(f"invalid UUID format: {resource_id!r}")
        self.resource_id = resource_id


class ResourceNotFoundError(StoreError):
    def __init__(self, resource_id: str):
        super().__init__("the id provided does not exist in database")
        self.resource_id = resource_id


class IdentifierGenerationError(StoreError):
    """Raised when a fresh identifier cannot be produced."""
