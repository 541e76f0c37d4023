from fastapi import Request

from travel_booking.application import BookingSystem
from travel_booking.shared.config import ApplicationContainer


def get_container(request: Request) -> ApplicationContainer:
    """Resolve the container attached to the running app."""
    container: ApplicationContainer | None = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("Application container not initialised. Is the lifespan running?")
    return container


def get_booking_system(request: Request) -> BookingSystem:
    """Resolve the app-scoped booking registry."""
    return get_container(request).booking_system
