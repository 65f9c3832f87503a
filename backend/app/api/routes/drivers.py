"""Driver Routes - register and enumerate drivers.

Invariants:
    - POST is operator-gated; GET is open and returns drivers in creation order
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import require_operator
from app.schemas.registry import DriverCreate, DriverResponse
from app.services.registry_service import RegistryService, get_registry_service

router = APIRouter(prefix="/api/v1/drivers", tags=["drivers"])


@router.post(
    "", response_model=DriverResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_operator)],
)
async def create_driver(
    body: DriverCreate,
    service: RegistryService = Depends(get_registry_service),
):
    """Register a new driver. Names are unique."""
    driver = await service.create_driver(body.name, body.id_car)
    return DriverResponse.model_validate(driver)


@router.get("", response_model=list[DriverResponse])
async def list_drivers(
    service: RegistryService = Depends(get_registry_service),
):
    return [DriverResponse.model_validate(d) for d in service.registry.drivers()]
