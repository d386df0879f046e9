"""kernelconfig - Read-only, type-checked access to nested configuration."""

from __future__ import annotations

# Store
from kernelconfig.config import PATH_SEPARATOR, ReadOnlyConfig

# Errors
from kernelconfig.errors import (
    ConfigurationError,
    ErrorCodes,
    InvalidConfigTree,
    InvalidConfigValue,
    MissingConfigKey,
)

__version__ = "0.1.0"

__all__ = [
    # Store
    "ReadOnlyConfig",
    "PATH_SEPARATOR",
    # Errors
    "ErrorCodes",
    "ConfigurationError",
    "MissingConfigKey",
    "InvalidConfigValue",
    "InvalidConfigTree",
]
