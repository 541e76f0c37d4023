from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from travel_booking.api.middleware import ErrorHandlerMiddleware, validation_exception_handler
from travel_booking.api.routers.health import router as health_router
from travel_booking.api.routers.payments import router as payments_router
from travel_booking.api.routers.reservations import router as reservations_router
from travel_booking.shared.config import ApplicationContainer, Settings, settings


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build and configure the FastAPI application instance."""
    app_settings = app_settings or settings
    container = ApplicationContainer(app_settings)

    @asynccontextmanager
    async def app_lifespan(app: FastAPI):
        """Attach the container for the lifetime of the app."""
        app.state.container = container
        try:
            yield
        finally:
            container.shutdown()

    app = FastAPI(
        title=app_settings.app_name,
        debug=app_settings.app_debug,
        version=app_settings.app_version,
        lifespan=app_lifespan,
    )
    if app_settings.cors_allowed_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_allowed_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(payments_router, prefix="/api/v1")
    app.include_router(reservations_router, prefix="/api/v1")
    return app
