"""Abstract repository for User accounts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by id, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by email (case-insensitive), or None."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Persist a new user.

        Raises ConflictError if the email is already registered; the
        check and the append happen under the same lock.
        """
