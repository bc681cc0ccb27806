# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to API endpoints, keys, server and logging settings

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from species_catalog.extraction.base import WikipediaClientSettings


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="SPECIES_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Wikipedia lookup
    wikipedia_api_url: str = Field(
        default="https://en.wikipedia.org/w/api.php", description="MediaWiki action API endpoint"
    )
    user_agent: str = Field(
        default="species-catalog/0.1 (https://github.com/species-catalog/species-catalog)",
        description="User-Agent sent with outbound encyclopedia requests",
    )
    http_timeout: float | None = Field(
        default=None, description="Timeout in seconds for outbound requests (None keeps the httpx default)"
    )

    # Chat assistant
    groq_api_key: str = Field(default="", description="Groq API key for the species chat assistant")
    groq_model: str = Field(default="llama-3.3-70b-versatile", description="Chat completion model name")
    groq_api_url: str = Field(
        default="https://api.groq.com/openai/v1/chat/completions",
        description="OpenAI-compatible chat completions endpoint",
    )
    chat_max_attempts: int = Field(default=3, ge=1, description="Attempts for rate-limited chat completions")

    # Web server
    host: str = Field(default="127.0.0.1", description="Bind address for the web server")
    port: int = Field(default=8000, description="Port for the web server")

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")

    def wikipedia_settings(self) -> WikipediaClientSettings:
        """Build the immutable settings value consumed by the Wikipedia extractor."""
        return WikipediaClientSettings(api_url=self.wikipedia_api_url, user_agent=self.user_agent, timeout=self.http_timeout)


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
