"""Identity ports.

The ordering core only ever needs a subject id for the caller.  How
tokens are minted and how passwords are stored belong to adapters in
the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class IdentityVerifier(ABC):

    @abstractmethod
    def verify(self, token: str | None) -> str:
        """Return the subject id for *token* or raise AuthError."""


class TokenIssuer(ABC):

    @abstractmethod
    def issue(self, user: User) -> str:
        """Mint a bearer credential for *user*."""


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str: ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool: ...
