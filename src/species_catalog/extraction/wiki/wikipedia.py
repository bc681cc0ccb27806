# ABOUTME: Species lookup against the Wikipedia action API using httpx
# ABOUTME: Search for one page, fetch its plain-text intro, mine fields; fails closed to None

from typing import Any

import httpx

from species_catalog.extraction.base import ExtractionError, SpeciesLookup, WikipediaClientSettings
from species_catalog.extraction.models import ExtractedFields
from species_catalog.extraction.text import extract_fields
from species_catalog.utils.logging import get_logger, log_api_call


class WikipediaSpeciesExtractor(SpeciesLookup):
    """Looks up a species on Wikipedia and extracts form fields from the page intro.

    Two sequential requests per lookup: a full-text search limited to one hit, then
    an extract fetch for that page id. The second request is skipped when the search
    response already carries a usable extract for the hit.
    """

    def __init__(self, settings: WikipediaClientSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or WikipediaClientSettings()
        self._owns_client = client is None
        self.http_client = client or self._build_client(self.settings)  # Allow for dependency injection
        self.logger = get_logger(__name__)

    @staticmethod
    def _build_client(settings: WikipediaClientSettings) -> httpx.AsyncClient:
        options: dict[str, Any] = {"headers": {"User-Agent": settings.user_agent}}
        if settings.timeout is not None:
            options["timeout"] = settings.timeout
        return httpx.AsyncClient(**options)

    async def __aenter__(self) -> "WikipediaSpeciesExtractor":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this extractor created it."""
        if self._owns_client:
            await self.http_client.aclose()

    async def lookup(self, query: str) -> ExtractedFields | None:
        """Look up a species by free-text name.

        Any upstream failure (transport error, non-2xx status, undecodable or
        unexpected JSON) is logged and reported as None.
        """
        query = query.strip()
        if not query:
            return None

        try:
            hit = await self.search_page_id(query)
            if hit is None:
                self.logger.info("No search hits", query=query)
                return None

            page_id, extract = hit
            if not extract:
                extract = await self.fetch_extract(page_id)
            if not extract:
                self.logger.info("Page has no extract", query=query, page_id=page_id)
                return None

        except (httpx.HTTPError, ExtractionError, ValueError) as e:
            # ValueError covers undecodable bodies: bad JSON and bad UTF-8 alike
            self.logger.warning("Wikipedia lookup failed", query=query, error=str(e), error_type=type(e).__name__)
            return None

        fields = extract_fields(extract)
        self.logger.info(
            "Extracted species fields",
            query=query,
            page_id=page_id,
            found=fields.found_fields if fields else [],
        )
        return fields

    @log_api_call("wikipedia.search")
    async def search_page_id(self, query: str) -> tuple[int, str | None] | None:
        """Find the best-matching page for a query.

        Returns:
            (page_id, embedded_extract) for the first hit, or None when there are no hits
        """
        data = await self._get_json(
            {
                "action": "query",
                "format": "json",
                "list": "search",
                "srsearch": query,
                "srlimit": 1,
                "prop": "extracts",
                "exintro": "true",
                "explaintext": "true",
                "origin": "*",
            }
        )

        search = _as_dict(data.get("query")).get("search")
        if not isinstance(search, list) or not search:
            return None

        page_id = _as_dict(search[0]).get("pageid")
        if not isinstance(page_id, int) or isinstance(page_id, bool):
            raise ExtractionError(f"Search hit without a numeric pageid: {search[0]!r}")

        pages = _as_dict(_as_dict(data.get("query")).get("pages"))
        embedded = _as_dict(pages.get(str(page_id))).get("extract")
        return page_id, embedded if isinstance(embedded, str) else None

    @log_api_call("wikipedia.extract")
    async def fetch_extract(self, page_id: int) -> str | None:
        """Fetch the plain-text introductory extract of a page."""
        data = await self._get_json(
            {
                "action": "query",
                "format": "json",
                "prop": "extracts",
                "pageids": page_id,
                "exintro": "true",
                "explaintext": "true",
                "origin": "*",
            }
        )

        pages = _as_dict(_as_dict(data.get("query")).get("pages"))
        page = _as_dict(next(iter(pages.values()), None))
        extract = page.get("extract")
        return extract if isinstance(extract, str) else None

    async def _get_json(self, params: dict[str, Any]) -> dict[str, Any]:
        response = await self.http_client.get(self.settings.api_url, params=params)
        response.raise_for_status()

        data = response.json()
        if not isinstance(data, dict):
            raise ExtractionError(f"Expected a JSON object, got {type(data).__name__}")
        return data


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}
