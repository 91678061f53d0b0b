"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_collection import JsonCollection


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._collection = JsonCollection(file_path)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._collection.load():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_email(self, email: str) -> User | None:
        wanted = email.strip().lower()
        for raw in self._collection.load():
            if raw["email"].lower() == wanted:
                return self._to_domain(raw)
        return None

    def add(self, user: User) -> None:
        def append_unique(users: list[dict]) -> None:
            if any(user.has_email(raw["email"]) for raw in users):
                raise ConflictError("Email already registered")
            users.append(self._to_raw(user))

        self._collection.update(append_unique)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "email": user.email,
            "name": user.name,
            "hash": user.password_hash,
            "provider": user.provider,
            "created_at": user.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            email=raw["email"],
            name=raw.get("name", ""),
            password_hash=raw.get("hash"),
            provider=raw.get("provider", "password"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
