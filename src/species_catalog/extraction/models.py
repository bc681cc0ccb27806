# ABOUTME: Output contract of the species lookup
# ABOUTME: Snake_case attributes, camelCase JSON aliases matching the form autofill payload

from pydantic import BaseModel, ConfigDict, Field


class ExtractedFields(BaseModel):
    """Independently derived optional values mined from a page extract."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    description: str
    scientific_name: str | None = Field(default=None, alias="scientificName")
    common_name: str | None = Field(default=None, alias="commonName")
    total_population: int | None = Field(default=None, alias="totalPopulation", gt=0)

    def to_payload(self) -> dict:
        """Wire representation: camelCase keys, absent fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)

    @property
    def found_fields(self) -> list[str]:
        return [name for name, value in self.model_dump().items() if value is not None]
