# ABOUTME: Encyclopedia-backed species extractors
# ABOUTME: Currently the MediaWiki action API (en.wikipedia.org)

from .wikipedia import WikipediaSpeciesExtractor

__all__ = ["WikipediaSpeciesExtractor"]
