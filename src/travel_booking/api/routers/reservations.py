from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from travel_booking.api.routers.dependencies import get_booking_system
from travel_booking.api.schemas import (
    BookingTotalResponseDTO,
    ErrorResponseDTO,
    ReservationRequestDTO,
    ReservationResponseDTO,
    ReservationUpdateDTO,
)
from travel_booking.application import BookingSystem
from travel_booking.domain.entities import Reservation

router = APIRouter(prefix="/reservations", tags=["reservations"])

BookingSystemDep = Annotated[BookingSystem, Depends(get_booking_system)]


def _to_response(reservation: Reservation) -> ReservationResponseDTO:
    return ReservationResponseDTO.model_validate(reservation.describe())


def _not_found(reservation_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Reservation {reservation_id} not found",
    )


@router.post(
    "",
    response_model=ReservationResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create reservation",
    description="Create a hotel, flight or car-rental reservation and register it.",
    responses={
        201: {
            "description": "Reservation created",
            "content": {
                "application/json": {
                    "example": {
                        "reservation_id": "RES-1",
                        "reservation_type": "Hotel",
                        "customer_name": "Ivan Ivanov",
                        "start_date": "2023-06-01",
                        "end_date": "2023-06-07",
                        "price": "630",
                        "room_type": "Deluxe",
                        "meal_plan": "All Inclusive",
                    }
                }
            },
        },
        400: {"model": ErrorResponseDTO, "description": "Unknown type or unusable fields"},
        422: {"model": ErrorResponseDTO, "description": "Validation error"},
    },
)
async def create_reservation(
    payload: ReservationRequestDTO,
    booking_system: BookingSystemDep,
) -> ReservationResponseDTO:
    """Create and register a reservation from validated API input."""
    reservation = booking_system.create_reservation(
        payload.reservation_type,
        **payload.reservation_fields(),
    )
    return _to_response(reservation)


@router.get("", response_model=list[ReservationResponseDTO], summary="List reservations")
async def list_reservations(booking_system: BookingSystemDep) -> list[ReservationResponseDTO]:
    """Return active reservations in creation order."""
    return [_to_response(reservation) for reservation in booking_system.list_reservations()]


@router.get("/total", response_model=BookingTotalResponseDTO, summary="Total booking value")
async def get_total_booking_value(booking_system: BookingSystemDep) -> BookingTotalResponseDTO:
    """Return the summed current price of the active reservations."""
    return BookingTotalResponseDTO(
        total=booking_system.get_total_booking_value(),
        count=len(booking_system),
    )


@router.get(
    "/{reservation_id}",
    response_model=ReservationResponseDTO,
    summary="Get reservation",
    responses={404: {"description": "Reservation not found"}},
)
async def get_reservation(
    reservation_id: str,
    booking_system: BookingSystemDep,
) -> ReservationResponseDTO:
    reservation = booking_system.get_reservation(reservation_id)
    if reservation is None:
        raise _not_found(reservation_id)
    return _to_response(reservation)


@router.patch(
    "/{reservation_id}",
    response_model=ReservationResponseDTO,
    summary="Update reservation",
    responses={
        400: {"model": ErrorResponseDTO, "description": "Fields not valid for this reservation type"},
        404: {"description": "Reservation not found"},
    },
)
async def update_reservation(
    reservation_id: str,
    payload: ReservationUpdateDTO,
    booking_system: BookingSystemDep,
) -> ReservationResponseDTO:
    """Replace the given fields; the reservation type cannot change."""
    reservation = booking_system.update_reservation(reservation_id, **payload.changed_fields())
    if reservation is None:
        raise _not_found(reservation_id)
    return _to_response(reservation)


@router.delete(
    "/{reservation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Cancel reservation",
    responses={404: {"description": "Reservation not found"}},
)
async def cancel_reservation(
    reservation_id: str,
    booking_system: BookingSystemDep,
) -> Response:
    """Cancel and remove a reservation."""
    if not booking_system.cancel_reservation(reservation_id):
        raise _not_found(reservation_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
