"""Error hierarchy for kernelconfig."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigurationError",
    "MissingConfigKey",
    "InvalidConfigValue",
    "InvalidConfigTree",
    "ErrorCodes",
]


class ConfigurationError(Exception):
    """Base error for all kernelconfig errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class MissingConfigKey(ConfigurationError):
    """Raised when a dot-path does not resolve to a value."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_KEY_MISSING",
            message=f"The key [{key}] does not exist in the configuration.",
            details={"key": key},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The requested dot-path."""
        return self.details["key"]


class InvalidConfigValue(ConfigurationError):
    """Raised when a resolved value does not have the requested type."""

    def __init__(self, key: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_VALUE_INVALID",
            message=f"Expected a {expected} for config key [{key}], got {actual}.",
            details={"key": key, "expected": expected, "actual": actual},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The dot-path whose value had the wrong type."""
        return self.details["key"]

    @property
    def expected(self) -> str:
        """Name of the requested type."""
        return self.details["expected"]

    @property
    def actual(self) -> str:
        """Name of the type actually found."""
        return self.details["actual"]


class InvalidConfigTree(ConfigurationError):
    """Raised when the mapping handed to the store cannot be snapshotted."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_TREE_INVALID",
            message=f"Invalid configuration at [{path}]: {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The dot-path of the offending entry."""
        return self.details["path"]


class ErrorCodes:
    """All kernelconfig error codes as constants.

    Example:
        if error.code == ErrorCodes.CONFIG_KEY_MISSING:
            use_fallback()
    """

    CONFIG_KEY_MISSING = "CONFIG_KEY_MISSING"
    CONFIG_VALUE_INVALID = "CONFIG_VALUE_INVALID"
    CONFIG_TREE_INVALID = "CONFIG_TREE_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
