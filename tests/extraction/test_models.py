# ABOUTME: Tests for the ExtractedFields output contract
# ABOUTME: Covers camelCase serialization, omission of absent fields and immutability

import pytest
from pydantic import ValidationError

from species_catalog.extraction.models import ExtractedFields


class TestExtractedFields:
    """Test the ExtractedFields Pydantic model."""

    def test_payload_uses_camel_case_and_omits_missing(self):
        fields = ExtractedFields(description="A rodent.", scientific_name="Cavia porcellus")

        assert fields.to_payload() == {"description": "A rodent.", "scientificName": "Cavia porcellus"}

    def test_full_payload(self):
        fields = ExtractedFields(
            description="A bear.",
            scientific_name="Ailuropoda melanoleuca",
            common_name="The giant panda",
            total_population=1864,
        )

        assert fields.to_payload() == {
            "description": "A bear.",
            "scientificName": "Ailuropoda melanoleuca",
            "commonName": "The giant panda",
            "totalPopulation": 1864,
        }

    def test_accepts_aliases(self):
        fields = ExtractedFields.model_validate({"description": "A bear.", "totalPopulation": 10})

        assert fields.total_population == 10

    def test_population_must_be_positive(self):
        with pytest.raises(ValidationError):
            ExtractedFields(description="A bear.", total_population=0)

    def test_is_frozen(self):
        fields = ExtractedFields(description="A bear.")

        with pytest.raises(ValidationError):
            fields.description = "Changed"

    def test_found_fields(self):
        fields = ExtractedFields(description="A bear.", common_name="The giant panda")

        assert fields.found_fields == ["description", "common_name"]
