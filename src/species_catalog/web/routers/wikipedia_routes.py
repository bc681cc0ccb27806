"""Wikipedia autofill endpoint used by the add-species form."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from species_catalog.extraction.base import SpeciesLookup
from species_catalog.utils.logging import with_species_context
from species_catalog.web.dependencies import get_species_lookup
from species_catalog.web.models import ErrorResponse

router = APIRouter()


@router.get(
    "/wikipedia",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def lookup_species(
    lookup: Annotated[SpeciesLookup, Depends(get_species_lookup)],
    species: str | None = Query(None, description="Species name to look up"),
) -> JSONResponse:
    """Look up a species on Wikipedia.

    Returns the extracted fields, or ``null`` when no article or extract was found.
    """
    if not species or not species.strip():
        return JSONResponse(ErrorResponse(error="Species name is required").model_dump(), status_code=400)

    with with_species_context(species) as logger:
        try:
            fields = await lookup.lookup(species)
        except Exception as e:
            logger.error("Wikipedia API error", error=str(e), error_type=type(e).__name__)
            return JSONResponse(ErrorResponse(error="Failed to fetch Wikipedia data").model_dump(), status_code=500)

    return JSONResponse(fields.to_payload() if fields else None)
