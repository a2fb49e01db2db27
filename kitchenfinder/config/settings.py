"""
Runtime settings for KitchenFinder
Values come from environment variables (optionally loaded from a .env file)
"""

import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_DIRECTORY_URL = "https://api.staging.clustertruck.com/api/kitchens"
DEFAULT_DIRECTIONS_URL = "https://maps.googleapis.com/maps/api/directions/json"
DEFAULT_TIMEOUT = 30.0


def timeout_from_env(default: Optional[float] = DEFAULT_TIMEOUT) -> Optional[float]:
    """HTTP_TIMEOUT in seconds; "none" or a non-positive value disables it"""
    timeout = os.getenv("HTTP_TIMEOUT")
    if not timeout:
        return default
    if timeout.lower() == "none" or float(timeout) <= 0:
        return None
    return float(timeout)


class Settings(BaseModel):
    """Endpoints, credentials and HTTP behaviour"""

    directory_url: str = Field(
        DEFAULT_DIRECTORY_URL,
        description="Kitchen directory endpoint"
    )
    directions_url: str = Field(
        DEFAULT_DIRECTIONS_URL,
        description="Directions provider endpoint"
    )
    google_directions_api_key: str = Field(
        ...,
        description="Directions provider API key",
        min_length=1
    )
    timeout: Optional[float] = Field(
        DEFAULT_TIMEOUT,
        description="Per-request timeout in seconds (None disables it)"
    )
    log_level: str = Field(
        "INFO",
        description="Logging level name"
    )

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v):
        """Treat non-positive timeouts as disabled"""
        if v is not None and v <= 0:
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize log level names"""
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return v

    @classmethod
    def from_env(cls, api_key: Optional[str] = None) -> "Settings":
        """
        Build settings from environment variables

        Args:
            api_key: Explicit API key overriding GOOGLE_DIRECTIONS_API_KEY

        Returns:
            Settings instance

        Raises:
            ValueError: If no directions API key is available
        """
        api_key = api_key or os.getenv("GOOGLE_DIRECTIONS_API_KEY")
        if not api_key:
            raise ValueError(
                "Google Directions API key required. Set GOOGLE_DIRECTIONS_API_KEY"
            )

        values = {"google_directions_api_key": api_key}

        if os.getenv("KITCHEN_DIRECTORY_URL"):
            values["directory_url"] = os.getenv("KITCHEN_DIRECTORY_URL")
        if os.getenv("GOOGLE_DIRECTIONS_URL"):
            values["directions_url"] = os.getenv("GOOGLE_DIRECTIONS_URL")
        if os.getenv("LOG_LEVEL"):
            values["log_level"] = os.getenv("LOG_LEVEL")

        values["timeout"] = timeout_from_env()

        return cls(**values)
