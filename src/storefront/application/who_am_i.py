"""Application service: resolve a bearer token to the caller's profile."""

from __future__ import annotations

from storefront.application.dto import UserDTO, user_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.identity import IdentityVerifier


class WhoAmIHandler:

    def __init__(self, user_repo: UserRepository, verifier: IdentityVerifier) -> None:
        self._user_repo = user_repo
        self._verifier = verifier

    def handle(self, token: str | None) -> UserDTO:
        subject = self._verifier.verify(token)
        user = self._user_repo.get_by_id(subject)
        if user is None:
            raise EntityNotFoundError("Not found")
        return user_to_dto(user)
