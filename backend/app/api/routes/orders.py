"""Order Routes - record and enumerate orders.

Invariants:
    - POST is operator-gated and requires a registered customer
    - Duplicate order_number values are accepted
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import require_operator
from app.schemas.registry import OrderCreate, OrderResponse
from app.services.registry_service import RegistryService, get_registry_service

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


@router.post(
    "", response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_operator)],
)
async def create_order(
    body: OrderCreate,
    service: RegistryService = Depends(get_registry_service),
):
    order = await service.create_order(
        body.order_number, body.order_date, body.order_priority,
        body.customer_name, body.customer_address,
    )
    return OrderResponse.model_validate(order)


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    service: RegistryService = Depends(get_registry_service),
):
    return [OrderResponse.model_validate(o) for o in service.registry.orders()]
