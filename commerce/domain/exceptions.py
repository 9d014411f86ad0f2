"""
Domain exceptions.

Raised synchronously to the caller; nothing in the package retries them.
"""


class CommerceError(Exception):
    """Base exception for all commerce errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CommerceError):
    """Raised when an entity or value object invariant is violated."""
    pass


class PersistenceError(CommerceError):
    """Raised when a write violates a store constraint (duplicate id, missing reference)."""

    def __init__(self, operation: str, message: str):
        super().__init__(message, {"operation": operation})


class NotFoundError(CommerceError):
    """Raised when no record matches the requested identifier."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} not found: {entity_id}",
            {"entity": entity, "id": entity_id},
        )
