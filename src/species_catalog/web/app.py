"""Application factory for the species catalog HTTP API."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from species_catalog.config import Config, get_config
from species_catalog.extraction.wiki import WikipediaSpeciesExtractor
from species_catalog.services.chat import SpeciesChatService
from species_catalog.utils.logging import get_logger
from species_catalog.web.routers import chat_routes, health_routes, wikipedia_routes

logger = get_logger(__name__)


def create_app(config: Config | None = None) -> FastAPI:
    """Create the FastAPI application.

    The lifespan opens one shared httpx client for all outbound calls and
    stores the extractor and chat service on ``app.state``.
    """
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        client_options: dict[str, Any] = {"headers": {"User-Agent": config.user_agent}}
        if config.http_timeout is not None:
            client_options["timeout"] = config.http_timeout

        async with httpx.AsyncClient(**client_options) as client:
            app.state.species_lookup = WikipediaSpeciesExtractor(settings=config.wikipedia_settings(), client=client)
            app.state.chat_service = SpeciesChatService(
                api_key=config.groq_api_key,
                model=config.groq_model,
                api_url=config.groq_api_url,
                client=client,
                max_attempts=config.chat_max_attempts,
            )
            logger.info("Species catalog API started", wikipedia_api_url=config.wikipedia_api_url)
            yield
            logger.info("Species catalog API stopped")

    app = FastAPI(
        lifespan=lifespan,
        title="Species Catalog API",
        description="Wikipedia autofill and species chat assistant for the species catalog",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(wikipedia_routes.router, prefix="/api", tags=["Wikipedia"])
    app.include_router(chat_routes.router, prefix="/api", tags=["Chat"])
    app.include_router(health_routes.router, prefix="/api", tags=["Health"])

    return app
