import logging

from roomscheduler.backend.config import configure_logging, load_settings


def test_load_settings_reads_expected_env(monkeypatch) -> None:
    monkeypatch.setenv("ROOMSCHEDULER_HOST", "0.0.0.0")
    monkeypatch.setenv("ROOMSCHEDULER_PORT", "9000")
    monkeypatch.setenv("ROOMSCHEDULER_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.host == "0.0.0.0"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


def test_load_settings_applies_defaults(monkeypatch) -> None:
    monkeypatch.delenv("ROOMSCHEDULER_HOST", raising=False)
    monkeypatch.delenv("ROOMSCHEDULER_PORT", raising=False)
    monkeypatch.delenv("ROOMSCHEDULER_LOG_LEVEL", raising=False)

    settings = load_settings()

    assert settings.host == "127.0.0.1"
    assert settings.port == 3000
    assert settings.log_level == "INFO"


def test_configure_logging_passes_level_and_format(monkeypatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("WARNING")

    assert calls == [{"level": "WARNING", "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"}]
