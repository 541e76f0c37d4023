import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_level: str) -> None:
    """Apply a log level (e.g. `settings.log_level`) and format to the root logger."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("travel_booking").setLevel(level)
