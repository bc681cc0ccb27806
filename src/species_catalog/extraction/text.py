# ABOUTME: Regex rules that mine species fields out of cleaned extract prose
# ABOUTME: Each rule is a pure function over cleaned text so misses are locally attributable

import re

from .models import ExtractedFields

DESCRIPTION_MAX_LENGTH = 500

CITATION_PATTERN = re.compile(r"\[\d+\]", re.ASCII)
WHITESPACE_PATTERN = re.compile(r"\s+")
# "(Genus species)"
SCIENTIFIC_NAME_PATTERN = re.compile(r"\(([A-Z][a-z]+ [a-z]+)\)")
# Capitalized word at position zero, optionally followed by lowercase words
COMMON_NAME_PATTERN = re.compile(r"^([A-Z][a-z]+(?:\s+[a-z]+)*)")
POPULATION_PATTERN = re.compile(r"population[:\s]*([0-9,]+)", re.IGNORECASE)


def clean_extract(raw: str) -> str:
    """Strip [n] citation markers and collapse whitespace runs to single spaces."""
    text = CITATION_PATTERN.sub("", raw)
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def extract_description(text: str) -> str | None:
    """First DESCRIPTION_MAX_LENGTH characters of the cleaned text.

    Truncation is by character count and may cut a word in half.
    """
    return text[:DESCRIPTION_MAX_LENGTH] or None


def extract_scientific_name(text: str) -> str | None:
    match = SCIENTIFIC_NAME_PATTERN.search(text)
    return match.group(1) if match else None


def extract_common_name(text: str, scientific_name: str | None = None) -> str | None:
    """Leading capitalized phrase, dropped when it is exactly the scientific name."""
    match = COMMON_NAME_PATTERN.match(text)
    if not match or match.group(1) == scientific_name:
        return None
    return match.group(1)


def extract_total_population(text: str) -> int | None:
    """First number after the word "population", thousands separators stripped.

    Only the first textual occurrence is considered, even if it belongs to an
    unrelated clause.
    """
    match = POPULATION_PATTERN.search(text)
    if not match:
        return None

    digits = match.group(1).replace(",", "")
    if not digits:
        return None

    population = int(digits)
    return population if population > 0 else None


def extract_fields(raw_extract: str) -> ExtractedFields | None:
    """Clean a raw page extract and run every field rule over it.

    Returns:
        ExtractedFields, or None when the cleaned description is empty
    """
    text = clean_extract(raw_extract)
    description = extract_description(text)
    if not description:
        return None

    scientific_name = extract_scientific_name(text)
    return ExtractedFields(
        description=description,
        scientific_name=scientific_name,
        common_name=extract_common_name(text, scientific_name),
        total_population=extract_total_population(text),
    )
