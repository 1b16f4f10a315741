"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from storefront.config import CheckoutSettings, load_settings


class TestLoadSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STOREFRONT_SHIPPING_FEE_PER_ITEM", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = load_settings()
        assert settings.shipping_fee_per_item == 30
        assert settings.log_level is None

    def test_fee_from_environment(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_SHIPPING_FEE_PER_ITEM", "45")
        assert load_settings().shipping_fee_per_item == 45

    def test_environment_name(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_ENV", "Production")
        assert load_settings().environment == "production"

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert load_settings().log_level == "DEBUG"

    def test_invalid_fee(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_SHIPPING_FEE_PER_ITEM", "-3")
        with pytest.raises(ValidationError):
            load_settings()

    def test_settings_are_frozen(self):
        settings = CheckoutSettings()
        with pytest.raises(ValidationError):
            settings.shipping_fee_per_item = 10
