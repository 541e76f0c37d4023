from travel_booking.api.middleware.error_handler import (
    ErrorHandlerMiddleware,
    validation_exception_handler,
)

__all__ = [
    "ErrorHandlerMiddleware",
    "validation_exception_handler",
]
