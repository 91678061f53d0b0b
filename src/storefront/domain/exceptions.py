"""Domain-level exceptions.

Every failure is a subclass of DomainException carrying a stable ``kind``
so the CLI layer can catch them uniformly and report a structured error.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "internal"

    def to_dict(self) -> dict[str, str]:
        return {"error": self.kind, "message": str(self)}


class InvalidRequestError(DomainException):
    """Malformed input or a violated business rule."""

    kind = "invalid_request"


class InvalidQuantityError(InvalidRequestError):
    """A cart quantity is not a positive integer."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist (or is not visible to the caller)."""

    kind = "not_found"


class ProductNotFoundError(EntityNotFoundError):
    """A cart references a product the catalog does not know."""

    kind = "product_not_found"


class AuthError(DomainException):
    """Missing or invalid credential."""

    kind = "auth"


class ConflictError(DomainException):
    """The entity already exists, e.g. a duplicate registration."""

    kind = "conflict"


class StorageError(DomainException):
    """The persistence layer failed to read or write."""
