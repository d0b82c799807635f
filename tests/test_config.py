"""
Tests for production configuration checks.
"""
import pytest

from visitrewards.config import ProductionConfig, validate_config


class TestProductionSecretKey:

    def test_missing_key(self, monkeypatch):
        monkeypatch.setattr(ProductionConfig, 'SECRET_KEY', '')
        with pytest.raises(RuntimeError, match='must be set'):
            validate_config('production')

    def test_short_key(self, monkeypatch):
        monkeypatch.setattr(ProductionConfig, 'SECRET_KEY', 'a' * 16)
        with pytest.raises(RuntimeError, match='at least 32'):
            ProductionConfig.validate_secret_key()

    def test_development_placeholder(self, monkeypatch):
        monkeypatch.setattr(ProductionConfig, 'SECRET_KEY', 'dev-secret-key-change-in-production')
        with pytest.raises(RuntimeError, match='placeholder'):
            ProductionConfig.validate_secret_key()

    def test_valid_key(self, monkeypatch):
        key = 'f3' * 32
        monkeypatch.setattr(ProductionConfig, 'SECRET_KEY', key)
        assert ProductionConfig.validate_secret_key() == key

    def test_other_environments_skip_check(self, monkeypatch):
        monkeypatch.setattr(ProductionConfig, 'SECRET_KEY', '')
        validate_config('development')
