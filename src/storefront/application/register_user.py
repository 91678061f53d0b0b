"""Application service: Register User use case.

Emails are unique case-insensitively; a second registration for the
same address is rejected with ConflictError by the repository.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import AuthResultDTO, user_to_dto
from storefront.domain.exceptions import InvalidRequestError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.identity import PasswordHasher, TokenIssuer

logger = structlog.get_logger(__name__)


class RegisterUserHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._issuer = issuer

    def handle(self, email: str, password: str, name: str = "") -> AuthResultDTO:
        if not email or not email.strip() or not password:
            raise InvalidRequestError("Email and password are required")

        user = User.register(email=email, password_hash=self._hasher.hash(password), name=name)
        self._user_repo.add(user)

        logger.info("user.registered", user_id=user.id)
        return AuthResultDTO(token=self._issuer.issue(user), user=user_to_dto(user))
