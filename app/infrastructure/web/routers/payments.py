"""
Payment router.
Opens payment intents with the gateway and records completed payments.
"""

from typing import Annotated, Any, Dict, List
from fastapi import APIRouter, Body, Depends

from app.application.dto.payment_dto import PaymentIntentRequestDTO, PaymentIntentResponseDTO
from app.application.use_cases.document_use_cases import (
    CreateDocumentUseCase,
    ListDocumentsUseCase,
)
from app.application.use_cases.payment_use_cases import CreatePaymentIntentUseCase
from app.config import Settings, get_settings
from app.domain.repositories import Repositories
from app.domain.services.payment_gateway import PaymentGateway
from app.infrastructure.auth import get_current_claims, require_owner, require_tenant
from app.infrastructure.db.database import get_repositories
from app.infrastructure.payments import get_payment_gateway


intent_router = APIRouter()
router = APIRouter()


@intent_router.post(
    "/create-payment-intent",
    response_model=PaymentIntentResponseDTO,
    dependencies=[Depends(get_current_claims)]
)
async def create_payment_intent(
    request: PaymentIntentRequestDTO,
    gateway: Annotated[PaymentGateway, Depends(get_payment_gateway)],
    settings: Annotated[Settings, Depends(get_settings)]
):
    """
    Open a charge for a price and return the client secret needed to complete it.

    - **price**: Price in major currency units; charged as price x 100 minor units
    """
    use_case = CreatePaymentIntentUseCase(
        gateway,
        currency=settings.payment_currency,
        payment_method_types=settings.payment_method_types,
    )
    client_secret = await use_case.execute(request.price)
    return PaymentIntentResponseDTO(client_secret=client_secret)


@router.get("/owner/{email}", dependencies=[Depends(require_owner)])
async def list_owner_payments(
    email: str,
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> List[Dict[str, Any]]:
    """List payments received by an owner. Owner only."""
    return await ListDocumentsUseCase(repositories.payments).execute("ownerEmail", email)


@router.get("/{email}", dependencies=[Depends(require_tenant)])
async def list_tenant_payments(
    email: str,
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> List[Dict[str, Any]]:
    """List payments made by a tenant. Tenant only."""
    return await ListDocumentsUseCase(repositories.payments).execute("email", email)


@router.post("", dependencies=[Depends(get_current_claims)])
async def record_payment(
    payment: Annotated[Dict[str, Any], Body(...)],
    repositories: Annotated[Repositories, Depends(get_repositories)]
) -> Dict[str, Any]:
    """Record a completed payment."""
    result = await CreateDocumentUseCase(repositories.payments).execute(payment)
    return result.to_dict()
