from decimal import Decimal

from pydantic import BaseModel, Field

from travel_booking.domain.enums import PaymentMethod


class PaymentRequestDTO(BaseModel):
    """Request body for `POST /api/v1/payments`."""

    method: PaymentMethod
    amount: Decimal = Field(gt=Decimal("0"), examples=["200.75"])
    payment_details: str | None = Field(
        default=None,
        max_length=255,
        examples=["4111111111111111|12/25|123"],
    )


class RefundRequestDTO(BaseModel):
    """Request body for `POST /api/v1/payments/refunds`."""

    method: PaymentMethod
    amount: Decimal = Field(gt=Decimal("0"), examples=["100.50"])
    transaction_id: str = Field(min_length=1, max_length=120, examples=["TX-1001"])


class PaymentResponseDTO(BaseModel):
    """Outcome of a charge or refund."""

    method: PaymentMethod
    success: bool
