"""User account as seen by the identity adapter.

Only registration and sign-in touch users; the ordering core sees
nothing but the subject id produced by token verification.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str = ""
    password_hash: str | None = None
    provider: str = "password"
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def register(email: str, password_hash: str, name: str = "") -> User:
        return User(
            id=uuid4().hex,
            email=email.strip(),
            name=name.strip(),
            password_hash=password_hash,
        )

    def has_email(self, email: str) -> bool:
        return self.email.lower() == email.strip().lower()
