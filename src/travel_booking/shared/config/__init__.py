from travel_booking.shared.config.container import ApplicationContainer
from travel_booking.shared.config.settings import Settings, settings

__all__ = ["ApplicationContainer", "Settings", "settings"]
