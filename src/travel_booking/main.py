import uvicorn

from travel_booking.api.app import create_app
from travel_booking.shared.config import settings
from travel_booking.shared.logging import configure_logging

configure_logging(settings.log_level)

app = create_app(settings)


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
