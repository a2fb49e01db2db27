"""
KitchenFinder Configuration Module
Handles environment based settings
"""

from .settings import (
    DEFAULT_DIRECTIONS_URL,
    DEFAULT_DIRECTORY_URL,
    DEFAULT_TIMEOUT,
    Settings,
    timeout_from_env,
)

__all__ = [
    "Settings",
    "DEFAULT_DIRECTORY_URL",
    "DEFAULT_DIRECTIONS_URL",
    "DEFAULT_TIMEOUT",
    "timeout_from_env",
]
