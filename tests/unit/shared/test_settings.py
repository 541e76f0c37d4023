from travel_booking.shared.config import Settings


def test_settings_defaults() -> None:
    app_settings = Settings(_env_file=None)

    assert app_settings.reservation_id_prefix == "RES-"
    assert app_settings.crypto_currency == "BTC"
    assert app_settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("RESERVATION_ID_PREFIX", "BK-")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    app_settings = Settings(_env_file=None)

    assert app_settings.reservation_id_prefix == "BK-"
    assert app_settings.app_debug is False
    assert app_settings.log_level == "DEBUG"


def test_cors_origins_are_split_and_trimmed() -> None:
    app_settings = Settings(
        _env_file=None,
        cors_allowed_origins="http://localhost:3000, http://localhost:5173,",
    )

    assert app_settings.cors_allowed_origins_list == [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
