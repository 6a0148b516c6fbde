"""
Configuration management for Flight Search.

Loads settings from environment variables with sensible defaults.
Provider keys are secrets and are re-read on every call to load_config(),
so request handlers always see the current process environment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read an environment variable, treating blank values as unset."""
    value = os.getenv(name, '').strip()
    return value or default


def _parse_timeout(value: Optional[str]) -> float:
    """Parse a timeout in seconds, falling back to 15s if empty/invalid."""
    try:
        timeout = float(value) if value else 15.0
    except ValueError:
        return 15.0
    return timeout if timeout > 0 else 15.0


@dataclass(frozen=True)
class AviationStackConfig:
    """AviationStack API configuration for flight status and route data."""
    api_key: Optional[str] = field(default_factory=lambda: _env('AVIATIONSTACK_API_KEY'))
    base_url: str = field(
        default_factory=lambda: _env('AVIATIONSTACK_BASE_URL', 'http://api.aviationstack.com/v1')
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class FlightApiConfig:
    """FlightAPI.io configuration for fare pricing."""
    api_key: Optional[str] = field(default_factory=lambda: _env('FLIGHTAPI_KEY'))
    base_url: str = field(
        default_factory=lambda: _env('FLIGHTAPI_BASE_URL', 'https://api.flightapi.io')
    )
    # Relative booking links from the fare provider are resolved against this
    booking_base_url: str = field(
        default_factory=lambda: _env('BOOKING_BASE_URL', 'https://www.skyscanner.com')
    )

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    aviationstack: AviationStackConfig
    flightapi: FlightApiConfig

    # Applied to every outbound provider call
    request_timeout: float

    # Flask settings
    debug: bool
    port: int


def load_config() -> AppConfig:
    """Load all configuration from the current environment."""
    return AppConfig(
        aviationstack=AviationStackConfig(),
        flightapi=FlightApiConfig(),
        request_timeout=_parse_timeout(_env('PROVIDER_TIMEOUT_SECONDS')),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
        port=int(os.getenv('PORT', '5000')),
    )


# Process-level settings (logging level, port); provider keys are
# looked up again per request.
config = load_config()
