"""Client settings: env vars (``RETIREMENT_CLIENT_*``) over code defaults."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

RETIREMENT_PATH = "/api/v1/calculator/retirement"
LEGACY_CALCULATE_PATH = "/api/v1/calculator/calculate"
HEALTH_PATH = "/api/v1/calculator/health"


class ClientSettings(BaseSettings):
    """Where the calculator lives and how this client talks and logs.

    Attributes:
        base_url: Scheme and host of the calculator service.
        endpoint_path: POST path for calculations.
        health_path: GET path of the service health probe.
        timeout: Seconds before the transport gives up. ``None`` leaves the
            HTTP library default in place.
        cors_origins: Frontend origins allowed to call the relay app.
        verbose: DEBUG logging for ``retirement_client``.
        log_json: JSON log lines instead of console output.
    """

    model_config = SettingsConfigDict(env_prefix="RETIREMENT_CLIENT_", frozen=True)

    base_url: str = "http://localhost:8080"
    endpoint_path: str = RETIREMENT_PATH
    health_path: str = HEALTH_PATH
    timeout: Optional[float] = Field(default=None, gt=0)
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:4200", "http://localhost:5173"]
    )
    verbose: bool = False
    log_json: bool = False
