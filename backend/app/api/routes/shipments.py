"""Shipment Routes - record and enumerate shipments.

Invariants:
    - POST is operator-gated; driver and every receiver must be registered
    - New shipments are always Pending with created_at == updated_at
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import require_operator
from app.schemas.registry import ShipmentCreate, ShipmentResponse
from app.services.registry_service import RegistryService, get_registry_service

router = APIRouter(prefix="/api/v1/shipments", tags=["shipments"])


@router.post(
    "", response_model=ShipmentResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_operator)],
)
async def create_shipment(
    body: ShipmentCreate,
    service: RegistryService = Depends(get_registry_service),
):
    shipment = await service.create_shipment(
        body.shipment_id, body.driver_name, body.receivers,
        body.origins, body.destinations, body.tracking_number, body.weight,
    )
    return ShipmentResponse.model_validate(shipment)


@router.get("", response_model=list[ShipmentResponse])
async def list_shipments(
    service: RegistryService = Depends(get_registry_service),
):
    return [
        ShipmentResponse.model_validate(s) for s in service.registry.shipments()
    ]
