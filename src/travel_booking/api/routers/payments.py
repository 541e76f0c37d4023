from typing import Annotated

from fastapi import APIRouter, Depends, status

from travel_booking.api.routers.dependencies import get_container
from travel_booking.api.schemas import (
    ErrorResponseDTO,
    PaymentRequestDTO,
    PaymentResponseDTO,
    RefundRequestDTO,
)
from travel_booking.shared.config import ApplicationContainer

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post(
    "",
    response_model=PaymentResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Make payment",
    description=(
        "Charge the amount through the selected method. Credit card payments are "
        "validated first; a rejected payment reports `success: false`."
    ),
    responses={
        422: {"model": ErrorResponseDTO, "description": "Validation error"},
    },
)
async def make_payment(
    payload: PaymentRequestDTO,
    container: Annotated[ApplicationContainer, Depends(get_container)],
) -> PaymentResponseDTO:
    """Charge through the processor configured for the requested method."""
    service = container.create_payment_service(payload.method)
    success = service.make_payment(payload.amount, payload.payment_details)
    return PaymentResponseDTO(method=payload.method, success=success)


@router.post(
    "/refunds",
    response_model=PaymentResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Refund payment",
    description="Refund a previous transaction through the selected method. Refunds are not validated.",
    responses={
        422: {"model": ErrorResponseDTO, "description": "Validation error"},
    },
)
async def refund_payment(
    payload: RefundRequestDTO,
    container: Annotated[ApplicationContainer, Depends(get_container)],
) -> PaymentResponseDTO:
    """Refund through the processor configured for the requested method."""
    service = container.create_payment_service(payload.method)
    success = service.refund_payment(payload.amount, payload.transaction_id)
    return PaymentResponseDTO(method=payload.method, success=success)
