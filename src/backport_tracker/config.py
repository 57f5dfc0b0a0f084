"""Environment-driven configuration for the board service and document client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _env(key: str, default: str = "") -> str:
    """Read an environment variable, falling back to ``default`` when unset."""
    return os.environ.get(key, default)


@dataclass(frozen=True)
class ServiceConfig:
    """Location of the external document service."""

    base_url: str = field(default_factory=lambda: _env("DOCUMENT_SERVICE_URL", "http://localhost:8080"))
    timeout: float = field(default_factory=lambda: float(_env("DOCUMENT_SERVICE_TIMEOUT", "10")))


@dataclass(frozen=True)
class TrackerConfig:
    """Issue tracker links rendered on cards."""

    browse_url: str = field(
        default_factory=lambda: _env("ISSUE_BROWSE_URL", "https://issues.redhat.com/browse/")
    )


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8000")))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class MonitorConfig:
    """Azure Monitor export; disabled when the connection string is empty."""

    connection_string: str = field(
        default_factory=lambda: _env("APPLICATIONINSIGHTS_CONNECTION_STRING")
    )


@dataclass(frozen=True)
class Settings:
    """Top-level settings grouping every sub-config."""

    service: ServiceConfig = field(default_factory=ServiceConfig)
    tracker: TrackerConfig = field(default_factory=TrackerConfig)
    app: AppConfig = field(default_factory=AppConfig)
    monitor: MonitorConfig = field(default_factory=MonitorConfig)


def load_settings() -> Settings:
    """Load ``.env`` (if present) and build settings from the environment."""
    load_dotenv()
    return Settings()
