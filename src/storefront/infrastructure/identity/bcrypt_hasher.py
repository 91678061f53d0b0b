"""Bcrypt password hashing."""

from __future__ import annotations

import bcrypt

from storefront.domain.service.identity import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Not a bcrypt hash
            return False
