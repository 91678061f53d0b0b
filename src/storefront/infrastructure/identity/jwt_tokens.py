"""HS256 JWT bearer tokens: the identity adapter behind the CLI.

Tokens carry ``sub`` (user id) and ``email``; verification yields the
``sub`` claim, which the ordering core uses as the order owner.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import structlog

from storefront.domain.exceptions import AuthError
from storefront.domain.model.user import User
from storefront.domain.service.identity import IdentityVerifier, TokenIssuer

logger = structlog.get_logger(__name__)

BEARER_PREFIX = "Bearer "


class JwtTokenService(TokenIssuer, IdentityVerifier):

    def __init__(
        self,
        secret: str,
        ttl: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._algorithm = algorithm

    def issue(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user.id,
            "email": user.email,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str | None) -> str:
        if token and token.startswith(BEARER_PREFIX):
            token = token[len(BEARER_PREFIX):]
        if not token or not token.strip():
            raise AuthError("No token")

        try:
            payload = jwt.decode(
                token.strip(),
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.info("auth.token_rejected", reason="expired")
            raise AuthError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            logger.info("auth.token_rejected", reason="invalid", error=str(exc))
            raise AuthError("Invalid token") from exc

        subject = payload["sub"]
        if not isinstance(subject, str) or not subject:
            raise AuthError("Invalid token")
        return subject
