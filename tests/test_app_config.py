# ABOUTME: Tests for environment-driven application configuration
# ABOUTME: Covers defaults, env overrides and the immutable Wikipedia settings value

import pytest
from pydantic import ValidationError

from species_catalog.config import Config, get_config, reload_config
from species_catalog.extraction.base import WikipediaClientSettings


class TestConfig:
    """Test Config defaults and overrides."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)  # no .env pickup
        config = Config()

        assert config.wikipedia_api_url == "https://en.wikipedia.org/w/api.php"
        assert config.groq_model == "llama-3.3-70b-versatile"
        assert config.http_timeout is None
        assert config.chat_max_attempts == 3

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SPECIES_CATALOG_WIKIPEDIA_API_URL", "https://de.wikipedia.org/w/api.php")
        monkeypatch.setenv("SPECIES_CATALOG_HTTP_TIMEOUT", "4.5")
        monkeypatch.setenv("species_catalog_port", "9000")

        config = Config()

        assert config.wikipedia_api_url == "https://de.wikipedia.org/w/api.php"
        assert config.http_timeout == 4.5
        assert config.port == 9000

    def test_invalid_log_level(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SPECIES_CATALOG_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Config()

    def test_wikipedia_settings(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        config = Config(wikipedia_api_url="https://wiki.test/w/api.php", user_agent="tester/1.0", http_timeout=3.0)

        settings = config.wikipedia_settings()

        assert settings == WikipediaClientSettings(
            api_url="https://wiki.test/w/api.php", user_agent="tester/1.0", timeout=3.0
        )


class TestConfigInstance:
    """Test the lazily created global instance."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_reload_config_replaces_instance(self):
        first = get_config()

        assert reload_config() is not first
        assert get_config() is not first
