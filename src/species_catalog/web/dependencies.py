"""FastAPI dependencies resolving the services created in the app lifespan."""

from fastapi import Request

from species_catalog.extraction.base import SpeciesLookup
from species_catalog.services.chat import SpeciesChatService


def get_species_lookup(request: Request) -> SpeciesLookup:
    return request.app.state.species_lookup


def get_chat_service(request: Request) -> SpeciesChatService:
    return request.app.state.chat_service
