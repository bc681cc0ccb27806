# ABOUTME: Species data extraction from the public encyclopedia
# ABOUTME: Search + extract fetch, then heuristic field extraction from the prose

"""
Extraction Layer: Turn a free-text species name into form-ready fields

This layer handles:
- Full-text search for the best-matching encyclopedia page
- Fetching the plain-text introductory extract of that page
- Cleaning the extract and mining optional fields with regex rules

Data Flow: Query → Search hit → Page extract → ExtractedFields
"""

from .base import ExtractionError, SpeciesLookup, WikipediaClientSettings
from .models import ExtractedFields

__all__ = [
    "ExtractedFields",
    "ExtractionError",
    "SpeciesLookup",
    "WikipediaClientSettings",
]
