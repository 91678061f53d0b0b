"""Tests for environment-driven settings."""

from datetime import timedelta
from pathlib import Path

import pytest

from storefront.infrastructure.config import DEFAULT_DATA_DIR, DEFAULT_JWT_SECRET, Settings


class TestSettingsFromEnv:

    def test_defaults(self):
        config = Settings.from_env({})
        assert config.data_dir == DEFAULT_DATA_DIR
        assert config.jwt_secret == DEFAULT_JWT_SECRET
        assert config.token_ttl == timedelta(days=7)
        assert config.shop_name == "Storefront"
        assert config.log_level == "WARNING"

    def test_overrides(self, tmp_path):
        config = Settings.from_env(
            {
                "STOREFRONT_DATA_DIR": str(tmp_path),
                "STOREFRONT_JWT_SECRET": "s",
                "STOREFRONT_TOKEN_TTL_DAYS": "1",
                "STOREFRONT_SHOP_NAME": "Bike Shop",
                "STOREFRONT_LOG_LEVEL": "debug",
                "STOREFRONT_BCRYPT_ROUNDS": "4",
            }
        )
        assert config.data_dir == Path(tmp_path)
        assert config.orders_path == Path(tmp_path) / "orders.json"
        assert config.token_ttl == timedelta(days=1)
        assert config.shop_name == "Bike Shop"
        assert config.log_level == "DEBUG"
        assert config.bcrypt_rounds == 4

    def test_bad_number(self):
        with pytest.raises(ValueError, match="Invalid numeric setting"):
            Settings.from_env({"STOREFRONT_TOKEN_TTL_DAYS": "a week"})
