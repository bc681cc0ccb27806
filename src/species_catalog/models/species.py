# ABOUTME: Validated species record draft used by the add/edit forms
# ABOUTME: Normalizes blank optional inputs to None and merges lookup autofill results

from enum import Enum

from pydantic import BaseModel, Field, HttpUrl, field_validator

from species_catalog.extraction.models import ExtractedFields


class Kingdom(str, Enum):
    """Taxonomic kingdoms offered by the species form."""

    ANIMALIA = "Animalia"
    PLANTAE = "Plantae"
    FUNGI = "Fungi"
    PROTISTA = "Protista"
    ARCHAEA = "Archaea"
    BACTERIA = "Bacteria"


# Lookup result attribute -> draft attribute
AUTOFILL_FIELDS = {
    "scientific_name": "scientific_name",
    "common_name": "common_name",
    "description": "description",
    "total_population": "total_population",
}


class SpeciesDraft(BaseModel):
    """A species record as submitted from the add/edit form."""

    scientific_name: str = Field(min_length=1, description="Binomial name, required")
    common_name: str | None = None
    kingdom: Kingdom = Kingdom.ANIMALIA
    total_population: int | None = Field(default=None, gt=0)
    image: HttpUrl | None = None
    description: str | None = None

    @field_validator("scientific_name", mode="before")
    @classmethod
    def _strip_required(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("common_name", "image", "description", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def autofill(self, fields: ExtractedFields) -> "SpeciesDraft":
        """Return a copy with every field the lookup found written over this draft."""
        updates = {
            draft_name: getattr(fields, field_name)
            for field_name, draft_name in AUTOFILL_FIELDS.items()
            if getattr(fields, field_name) is not None
        }
        # Re-validate so the merged values go through the same normalization
        return SpeciesDraft.model_validate({**self.model_dump(), **updates})

    @staticmethod
    def autofilled_fields(fields: ExtractedFields) -> list[str]:
        """Human-readable names of the draft fields a lookup result would fill."""
        return [
            draft_name.replace("_", " ")
            for field_name, draft_name in AUTOFILL_FIELDS.items()
            if getattr(fields, field_name) is not None
        ]
