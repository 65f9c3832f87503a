"""Registry Stats Route - collection counts for reporting dashboards."""

from fastapi import APIRouter, Depends

from app.core.registry_stats import compute_registry_stats
from app.schemas.registry import RegistryStats
from app.services.registry_service import RegistryService, get_registry_service

router = APIRouter(prefix="/api/v1/registry", tags=["registry"])


@router.get("/stats", response_model=RegistryStats)
async def registry_stats(
    service: RegistryService = Depends(get_registry_service),
):
    return compute_registry_stats(service.registry)
