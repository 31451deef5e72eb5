import os
from dataclasses import dataclass, field
from typing import List, Optional

from fintra.utils.exceptions import ConfigError
from fintra.utils.helpers import parse_csv, parse_float, parse_int


@dataclass
class Settings:
    # App
    APP_NAME: str = "Fintra API"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 3000
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    LOG_PATH: str = "logs/app.log"

    # Upstream provider
    ALPHAVANTAGE_API_KEY: Optional[str] = None
    ALPHAVANTAGE_BASE_URL: str = "https://www.alphavantage.co/query"
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = field(default_factory=lambda: ["*"])


_settings: Optional[Settings] = None


def _load_from_env(settings: Settings) -> None:
    env = os.environ

    def set_if(name: str, cast, env_name: Optional[str] = None):
        key = env_name or name
        if key in env and env[key] != "":
            setattr(settings, name, cast(env[key]))

    set_if("APP_NAME", str)
    set_if("APP_HOST", str)
    # PORT is what most hosting platforms inject; APP_PORT wins when both are set.
    set_if("APP_PORT", lambda v: parse_int(v, settings.APP_PORT), env_name="PORT")
    set_if("APP_PORT", lambda v: parse_int(v, settings.APP_PORT))
    set_if("APP_VERSION", str)
    set_if("LOG_LEVEL", str)
    set_if("LOG_PATH", str)

    set_if("ALPHAVANTAGE_API_KEY", lambda v: v.strip())
    set_if("ALPHAVANTAGE_BASE_URL", lambda v: v.strip())
    set_if("UPSTREAM_TIMEOUT_SECONDS", lambda v: parse_float(v, settings.UPSTREAM_TIMEOUT_SECONDS))

    set_if("CORS_ALLOW_ORIGINS", lambda v: parse_csv(v, settings.CORS_ALLOW_ORIGINS))


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
        _load_from_env(_settings)
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


def validate_settings(settings: Settings) -> None:
    """Fail fast on configuration the gateway cannot run with."""
    problems = []
    if not (settings.ALPHAVANTAGE_API_KEY or "").strip():
        problems.append("ALPHAVANTAGE_API_KEY is required but not set")
    if not (settings.ALPHAVANTAGE_BASE_URL or "").strip():
        problems.append("ALPHAVANTAGE_BASE_URL must not be empty")
    elif not settings.ALPHAVANTAGE_BASE_URL.startswith(("http://", "https://")):
        problems.append("ALPHAVANTAGE_BASE_URL must be an http(s) URL")
    if not 0 < int(settings.APP_PORT) < 65536:
        problems.append(f"APP_PORT out of range: {settings.APP_PORT}")
    if not settings.UPSTREAM_TIMEOUT_SECONDS or settings.UPSTREAM_TIMEOUT_SECONDS <= 0:
        problems.append("UPSTREAM_TIMEOUT_SECONDS must be positive")
    if problems:
        raise ConfigError("; ".join(problems))
