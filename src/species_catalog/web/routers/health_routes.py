"""Health check endpoint for monitoring service status."""

from importlib.metadata import PackageNotFoundError, version

from fastapi import APIRouter

from species_catalog.web.models import HealthResponse

router = APIRouter()


def get_version() -> str:
    """Installed package version, or "unknown" when running from a bare checkout."""
    try:
        return version("species-catalog")
    except PackageNotFoundError:
        return "unknown"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", service="species-catalog", version=get_version())
