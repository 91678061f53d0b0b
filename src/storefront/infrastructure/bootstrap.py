"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from storefront.domain.service.invoice_renderer import InvoiceRenderer
from storefront.infrastructure.config import Settings
from storefront.infrastructure.identity.bcrypt_hasher import BcryptPasswordHasher
from storefront.infrastructure.identity.jwt_tokens import JwtTokenService
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def product_repository(config: Settings) -> JsonProductRepository:
    return JsonProductRepository(config.products_path)


def order_repository(config: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(config.orders_path)


def user_repository(config: Settings) -> JsonUserRepository:
    return JsonUserRepository(config.users_path)


def token_service(config: Settings) -> JwtTokenService:
    return JwtTokenService(config.jwt_secret, ttl=config.token_ttl)


def password_hasher(config: Settings) -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=config.bcrypt_rounds)


def invoice_renderer(config: Settings) -> InvoiceRenderer:
    return InvoiceRenderer(title=f"{config.shop_name} - Invoice")
