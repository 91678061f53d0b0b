"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_JWT_SECRET = "dev-secret-change-me"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    jwt_secret: str = DEFAULT_JWT_SECRET
    token_ttl: timedelta = field(default_factory=lambda: timedelta(days=7))
    shop_name: str = "Storefront"
    log_level: str = "WARNING"
    bcrypt_rounds: int = 12

    @property
    def products_path(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_path(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def users_path(self) -> Path:
        return self.data_dir / "users.json"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        try:
            ttl_days = int(env.get("STOREFRONT_TOKEN_TTL_DAYS", "7"))
            rounds = int(env.get("STOREFRONT_BCRYPT_ROUNDS", "12"))
        except ValueError as exc:
            raise ValueError(f"Invalid numeric setting: {exc}") from exc
        return Settings(
            data_dir=Path(env.get("STOREFRONT_DATA_DIR") or DEFAULT_DATA_DIR),
            jwt_secret=env.get("STOREFRONT_JWT_SECRET") or DEFAULT_JWT_SECRET,
            token_ttl=timedelta(days=ttl_days),
            shop_name=env.get("STOREFRONT_SHOP_NAME") or "Storefront",
            log_level=(env.get("STOREFRONT_LOG_LEVEL") or "WARNING").upper(),
            bcrypt_rounds=rounds,
        )
