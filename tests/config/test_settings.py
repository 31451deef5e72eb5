import pytest

import fintra.config.settings as settings_mod
from fintra.config.settings import Settings, _load_from_env, get_settings, validate_settings
from fintra.utils.exceptions import ConfigError

_ENV_KEYS = [
    "PORT",
    "APP_PORT",
    "APP_HOST",
    "LOG_LEVEL",
    "ALPHAVANTAGE_API_KEY",
    "ALPHAVANTAGE_BASE_URL",
    "UPSTREAM_TIMEOUT_SECONDS",
    "CORS_ALLOW_ORIGINS",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def load():
    s = Settings()
    _load_from_env(s)
    return s


def test_defaults(clean_env):
    s = load()
    assert s.APP_PORT == 3000
    assert s.ALPHAVANTAGE_BASE_URL == "https://www.alphavantage.co/query"
    assert s.ALPHAVANTAGE_API_KEY is None
    assert s.CORS_ALLOW_ORIGINS == ["*"]


def test_port_from_env(clean_env):
    clean_env.setenv("PORT", "8080")
    assert load().APP_PORT == 8080


def test_app_port_wins_over_port(clean_env):
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("APP_PORT", "9090")
    assert load().APP_PORT == 9090


def test_upstream_values_from_env(clean_env):
    clean_env.setenv("ALPHAVANTAGE_API_KEY", "  demo  ")
    clean_env.setenv("ALPHAVANTAGE_BASE_URL", "http://localhost:9999/query")
    clean_env.setenv("UPSTREAM_TIMEOUT_SECONDS", "2.5")
    clean_env.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example")
    s = load()
    assert s.ALPHAVANTAGE_API_KEY == "demo"
    assert s.ALPHAVANTAGE_BASE_URL == "http://localhost:9999/query"
    assert s.UPSTREAM_TIMEOUT_SECONDS == 2.5
    assert s.CORS_ALLOW_ORIGINS == ["https://a.example", "https://b.example"]


def test_bad_numeric_env_keeps_default(clean_env):
    clean_env.setenv("PORT", "not-a-port")
    assert load().APP_PORT == 3000


def test_validate_requires_api_key():
    with pytest.raises(ConfigError) as exc:
        validate_settings(Settings())
    assert "ALPHAVANTAGE_API_KEY" in str(exc.value)


def test_validate_rejects_bad_values():
    s = Settings(ALPHAVANTAGE_API_KEY="k", ALPHAVANTAGE_BASE_URL="ftp://x", APP_PORT=0, UPSTREAM_TIMEOUT_SECONDS=0)
    with pytest.raises(ConfigError) as exc:
        validate_settings(s)
    msg = str(exc.value)
    assert "http(s)" in msg
    assert "APP_PORT" in msg
    assert "UPSTREAM_TIMEOUT_SECONDS" in msg


def test_validate_accepts_complete_config():
    validate_settings(Settings(ALPHAVANTAGE_API_KEY="k"))


def test_get_settings_is_cached(clean_env, monkeypatch):
    monkeypatch.setattr(settings_mod, "_settings", None)
    clean_env.setenv("ALPHAVANTAGE_API_KEY", "cached")
    first = get_settings()
    assert first is get_settings()
    assert first.ALPHAVANTAGE_API_KEY == "cached"
    settings_mod.reset_settings()
    assert settings_mod._settings is None
