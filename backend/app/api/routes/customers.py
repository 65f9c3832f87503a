"""Customer Routes - register and enumerate customers.

Invariants:
    - POST is operator-gated; GET is open and returns customers in creation order
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import require_operator
from app.schemas.registry import CustomerCreate, CustomerResponse
from app.services.registry_service import RegistryService, get_registry_service

router = APIRouter(prefix="/api/v1/customers", tags=["customers"])


@router.post(
    "", response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_operator)],
)
async def create_customer(
    body: CustomerCreate,
    service: RegistryService = Depends(get_registry_service),
):
    """Register a new customer. Name, address and phone number are required."""
    customer = await service.create_customer(
        body.name, body.address, body.phone_number,
    )
    return CustomerResponse.model_validate(customer)


@router.get("", response_model=list[CustomerResponse])
async def list_customers(
    service: RegistryService = Depends(get_registry_service),
):
    return [
        CustomerResponse.model_validate(c) for c in service.registry.customers()
    ]
