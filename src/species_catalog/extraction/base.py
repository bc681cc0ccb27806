# ABOUTME: Protocol interface and shared types for species lookups
# ABOUTME: Lookups fail closed, so ExtractionError never reaches the caller

from typing import Protocol

from pydantic import BaseModel, ConfigDict

from .models import ExtractedFields


class SpeciesLookup(Protocol):
    """Protocol for looking up species fields by free-text name."""

    async def lookup(self, query: str) -> ExtractedFields | None:
        """Look up a species and extract structured fields.

        Args:
            query: Common name, scientific name or informal term

        Returns:
            The extracted fields, or None when nothing usable was found
        """
        ...


class ExtractionError(Exception):
    """Raised when an upstream response cannot be used for extraction."""

    pass


class WikipediaClientSettings(BaseModel):
    """Immutable connection settings for the encyclopedia API."""

    model_config = ConfigDict(frozen=True)

    api_url: str = "https://en.wikipedia.org/w/api.php"
    user_agent: str = "species-catalog/0.1 (https://github.com/species-catalog/species-catalog)"
    timeout: float | None = None
