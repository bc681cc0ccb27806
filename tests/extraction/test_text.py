# ABOUTME: Tests for the regex field rules applied to page extracts
# ABOUTME: Each rule is exercised on its own, then composed through extract_fields

import re

import pytest

from species_catalog.extraction.text import (
    DESCRIPTION_MAX_LENGTH,
    clean_extract,
    extract_common_name,
    extract_description,
    extract_fields,
    extract_scientific_name,
    extract_total_population,
)

GUINEA_PIG_EXTRACT = (
    "The guinea pig or domestic guinea pig (Cavia porcellus), also known as the cavy or domestic cavy,[1] "
    "is a species of rodent belonging to the genus Cavia in the family Caviidae.[2]\n\n"
    "Breeders tend to use the word cavy to describe the animal."
)


class TestCleanExtract:
    """Test citation stripping and whitespace normalization."""

    def test_strips_numeric_citations(self):
        assert clean_extract("A rodent.[1] Kept as a pet.[23]") == "A rodent. Kept as a pet."

    def test_keeps_non_numeric_brackets(self):
        assert clean_extract("Note[a] and [citation needed]") == "Note[a] and [citation needed]"

    def test_only_ascii_digits_count_as_citations(self):
        assert clean_extract("Cat[\u0663] here[3]") == "Cat[\u0663] here"

    def test_collapses_whitespace_and_newlines(self):
        assert clean_extract("  The guinea pig\n\n (Cavia   porcellus)\t is  ") == "The guinea pig (Cavia porcellus) is"

    def test_citation_removal_happens_before_collapse(self):
        assert clean_extract("word [1] next") == "word next"

    def test_empty_and_whitespace_only(self):
        assert clean_extract("") == ""
        assert clean_extract(" \n\t ") == ""


class TestExtractDescription:
    """Test the fixed-length description truncation."""

    def test_short_text_is_unchanged(self):
        assert extract_description("A small rodent.") == "A small rodent."

    def test_truncates_by_character_count(self):
        text = "a" * 498 + " guinea pig"
        description = extract_description(text)

        assert len(description) == DESCRIPTION_MAX_LENGTH
        # Cut mid-word on purpose
        assert description.endswith(" g")

    def test_empty_text_has_no_description(self):
        assert extract_description("") is None


class TestExtractScientificName:
    """Test the parenthesized binomial rule."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("The guinea pig (Cavia porcellus), also known as the cavy", "Cavia porcellus"),
            ("The giant panda (Ailuropoda melanoleuca) is a bear", "Ailuropoda melanoleuca"),
            ("First (Canis lupus) then (Felis catus)", "Canis lupus"),
            ("The lion (Panthera leo leo) is a subspecies", None),
            ("The cat (felis catus) is small", None),
            ("The cat (Felis Catus) is small", None),
            ("Cavia porcellus is a rodent", None),
        ],
    )
    def test_binomial_pattern(self, text, expected):
        assert extract_scientific_name(text) == expected


class TestExtractCommonName:
    """Test the leading capitalized phrase rule."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("The giant panda (Ailuropoda melanoleuca) is a bear", "The giant panda"),
            ("The guinea pig or domestic guinea pig (Cavia porcellus)", "The guinea pig or domestic guinea pig"),
            ("Giant Panda is a bear", "Giant"),
            ("giant panda is a bear", None),
            ("(Cavia porcellus) is a rodent", None),
        ],
    )
    def test_leading_phrase(self, text, expected):
        assert extract_common_name(text) == expected

    def test_discarded_when_equal_to_scientific_name(self):
        text = "Cavia porcellus (Cavia porcellus) is a species of rodent..."
        assert extract_common_name(text, "Cavia porcellus") is None

    def test_kept_when_only_a_prefix_of_scientific_name(self):
        # Exact equality only, no fuzzy matching
        text = "Cavia porcellus domesticus (Cavia porcellus) is a form"
        assert extract_common_name(text, "Cavia porcellus") == "Cavia porcellus domesticus"


class TestExtractTotalPopulation:
    """Test the population number rule."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("The giant panda population: 1,864 individuals remain in the wild.", 1864),
            ("Population 12000 adults", 12000),
            ("POPULATION:250", 250),
            ("a population of about 1,000", None),
            ("population: 0", None),
            ("population: ,,", None),
            ("no numbers here", None),
        ],
    )
    def test_population_pattern(self, text, expected):
        assert extract_total_population(text) == expected

    def test_first_textual_match_wins(self):
        text = "population 1990 census; the population: 5,000 today"
        assert extract_total_population(text) == 1990


class TestExtractFields:
    """Test the full cleaning and extraction pipeline."""

    def test_guinea_pig_extract(self):
        fields = extract_fields(GUINEA_PIG_EXTRACT)

        assert fields is not None
        assert fields.scientific_name == "Cavia porcellus"
        assert fields.common_name == "The guinea pig or domestic guinea pig"
        assert fields.total_population is None
        assert "[1]" not in fields.description
        assert "\n" not in fields.description

    def test_common_name_suppressed_when_duplicate(self):
        fields = extract_fields("Cavia porcellus (Cavia porcellus) is a species of rodent...")

        assert fields.scientific_name == "Cavia porcellus"
        assert fields.common_name is None

    def test_population_extracted(self):
        fields = extract_fields("The giant panda population: 1,864 individuals remain in the wild.")

        assert fields.total_population == 1864

    def test_non_positive_population_omitted(self):
        fields = extract_fields("population: 0")

        assert fields is not None
        assert fields.total_population is None
        assert fields.description == "population: 0"

    @pytest.mark.parametrize("raw", ["", "   \n ", "[1][2] \n[3]"])
    def test_empty_description_yields_none(self, raw):
        assert extract_fields(raw) is None

    def test_description_invariants_on_long_extract(self):
        raw = ("The red fox (Vulpes vulpes) is the largest of the true foxes.[4]  \n\n" * 30).strip()

        fields = extract_fields(raw)

        assert len(fields.description) <= DESCRIPTION_MAX_LENGTH
        assert not re.search(r"\[\d+\]", fields.description)
        assert not re.search(r"\s{2,}", fields.description)

    def test_same_input_gives_equal_result(self):
        assert extract_fields(GUINEA_PIG_EXTRACT) == extract_fields(GUINEA_PIG_EXTRACT)
