"""
Tests for environment-driven configuration.
"""

import pytest
from pydantic import ValidationError

from secday.core import config as config_module
from secday.core.config import AppConfig, get_config, reload_config
from secday.password.models import ScoringMode
from secday.password.service import create_password_service


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "_config", None)
    for var in ("LOG_LEVEL", "SCORING_MODE", "PWNED_API_URL", "PWNED_TIMEOUT", "WEB_PORT"):
        monkeypatch.delenv(var, raising=False)


class TestAppConfig:
    """Defaults and overrides."""

    def test_defaults(self):
        config = reload_config()

        assert config.log_level == "INFO"
        assert config.pwned.api_url == "https://api.pwnedpasswords.com"
        assert config.pwned.add_padding is True
        assert config.scoring.mode == ScoringMode.WEIGHTED
        assert config.web.port == 8080

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SCORING_MODE", "breach_only")
        monkeypatch.setenv("PWNED_TIMEOUT", "2.5")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = reload_config()

        assert config.scoring.mode == ScoringMode.BREACH_ONLY
        assert config.pwned.timeout == 2.5
        assert config.log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("LOG_LEVEL=warning\n", encoding="utf-8")

        assert reload_config().log_level == "WARNING"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            AppConfig()

    def test_config_is_cached(self):
        assert get_config() is get_config()

    def test_service_follows_config(self, monkeypatch):
        monkeypatch.setenv("SCORING_MODE", "breach_only")
        monkeypatch.setenv("PWNED_API_URL", "https://pwned.example/")

        service = create_password_service(reload_config())

        assert service.calculator.mode == ScoringMode.BREACH_ONLY
        assert service.client.range_url("ABCDE") == "https://pwned.example/range/ABCDE"
