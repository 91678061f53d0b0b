"""Application service: Sign In use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import AuthResultDTO, user_to_dto
from storefront.domain.exceptions import AuthError
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.identity import PasswordHasher, TokenIssuer

logger = structlog.get_logger(__name__)


class SignInHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._issuer = issuer

    def handle(self, email: str, password: str) -> AuthResultDTO:
        user = self._user_repo.get_by_email(email or "")
        # Same error for unknown email and wrong password
        if user is None or not user.password_hash:
            logger.info("user.signin_failed", reason="unknown_user")
            raise AuthError("Invalid credentials")
        if not self._hasher.verify(password or "", user.password_hash):
            logger.info("user.signin_failed", reason="bad_password", user_id=user.id)
            raise AuthError("Invalid credentials")

        return AuthResultDTO(token=self._issuer.issue(user), user=user_to_dto(user))
