"""Read-only configuration store with dot-path key support."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from kernelconfig.errors import InvalidConfigTree, InvalidConfigValue, MissingConfigKey

__all__ = ["ReadOnlyConfig", "PATH_SEPARATOR"]

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."

_ROOT = "<root>"

_SCALAR_TYPES = (str, int, float, bool, type(None))

# Keyed by the type name used in InvalidConfigValue messages.
_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    "string": TypeAdapter(str),
    "integer": TypeAdapter(int),
    "boolean": TypeAdapter(bool),
    "float": TypeAdapter(float),
    "array": TypeAdapter(list[Any]),
    "list of strings": TypeAdapter(list[str]),
}


def _snapshot(data: Mapping[Any, Any], path: str) -> dict[str, Any]:
    """Deep-copy a nested mapping into plain dicts and lists, rejecting unsupported entries."""
    result: dict[str, Any] = {}
    for key, value in data.items():
        if not isinstance(key, str):
            raise InvalidConfigTree(path=path or _ROOT, reason=f"key {key!r} is not a string")
        child = f"{path}{PATH_SEPARATOR}{key}" if path else key
        if isinstance(value, Mapping):
            result[key] = _snapshot(value, child)
        elif isinstance(value, (list, tuple)):
            result[key] = _snapshot_sequence(value, child)
        elif isinstance(value, _SCALAR_TYPES):
            result[key] = value
        else:
            raise InvalidConfigTree(path=child, reason=f"unsupported value type {type(value).__name__}")
    return result


def _snapshot_sequence(items: list[Any] | tuple[Any, ...], path: str) -> list[Any]:
    """Copy a sequence into a list. Items are copied but not type-checked."""
    result: list[Any] = []
    for index, item in enumerate(items):
        child = f"{path}[{index}]"
        if isinstance(item, Mapping):
            result.append(_snapshot(item, child))
        elif isinstance(item, (list, tuple)):
            result.append(_snapshot_sequence(item, child))
        else:
            try:
                result.append(copy.deepcopy(item))
            except (TypeError, copy.Error) as e:
                raise InvalidConfigTree(
                    path=child, reason=f"value of type {type(item).__name__} cannot be copied", cause=e
                ) from e
    return result


class ReadOnlyConfig:
    """Immutable configuration snapshot queried with dot-path keys.

    The mapping passed at construction is deep-copied; containers returned
    by any query are fresh copies, so callers can never reach the internal
    tree. Instances are safe to share between threads.

    Typed getters validate in pydantic strict mode: no coercion takes place,
    and ``bool`` is never accepted where an integer is requested.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise InvalidConfigTree(path=_ROOT, reason=f"expected a mapping, got {type(data).__name__}")
        object.__setattr__(self, "_data", _snapshot(data, ""))
        logger.debug("Created read-only configuration with %d top-level keys", len(self._data))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ReadOnlyConfig:
        """Build a store from a fully resolved nested mapping."""
        return cls(data)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ReadOnlyConfig is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("ReadOnlyConfig is immutable")

    # === Resolution ===

    def _resolve(self, key: str) -> Any:
        current: Any = self._data
        for segment in key.split(PATH_SEPARATOR):
            if isinstance(current, dict) and segment in current:
                current = current[segment]
            else:
                raise MissingConfigKey(key)
        return current

    def get(self, key: str) -> Any:
        """Return the raw value at a dot-path key.

        Raises:
            MissingConfigKey: If a segment is absent or an intermediate
                value is not a mapping.
        """
        value = self._resolve(key)
        if isinstance(value, (dict, list)):
            return copy.deepcopy(value)
        return value

    def has(self, key: str) -> bool:
        """Return True if ``get(key)`` would succeed."""
        try:
            self._resolve(key)
        except MissingConfigKey:
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the whole configuration tree."""
        return copy.deepcopy(self._data)

    # === Typed getters ===

    def _validate(self, key: str, expected: str, value: Any) -> Any:
        try:
            return _ADAPTERS[expected].validate_python(value, strict=True)
        except PydanticValidationError as e:
            raise InvalidConfigValue(
                key=key, expected=expected, actual=type(value).__name__, cause=e
            ) from e

    def get_string(self, key: str) -> str:
        return self._validate(key, "string", self.get(key))

    def get_integer(self, key: str) -> int:
        return self._validate(key, "integer", self.get(key))

    def get_boolean(self, key: str) -> bool:
        return self._validate(key, "boolean", self.get(key))

    def get_float(self, key: str) -> float:
        """Return a float; integers are accepted and widened."""
        return float(self._validate(key, "float", self.get(key)))

    def get_array(self, key: str) -> list[Any]:
        return self._validate(key, "array", self.get(key))

    def get_list_of_strings(self, key: str) -> list[str]:
        return self._validate(key, "list of strings", self.get(key))

    # The default argument of the *_or_null getters is accepted for call-site
    # compatibility but never returned: a missing key always raises.

    def _get_or_null(self, key: str, expected: str) -> Any:
        value = self.get(key)
        if value is None:
            return None
        return self._validate(key, expected, value)

    def get_string_or_null(self, key: str, default: str | None = None) -> str | None:
        """Return a string, or None if the key holds None.

        Raises:
            MissingConfigKey: If the key does not exist, even when a default is given.
            InvalidConfigValue: If the value is neither None nor a string.
        """
        return self._get_or_null(key, "string")

    def get_integer_or_null(self, key: str, default: int | None = None) -> int | None:
        return self._get_or_null(key, "integer")

    def get_boolean_or_null(self, key: str, default: bool | None = None) -> bool | None:
        return self._get_or_null(key, "boolean")

    def get_float_or_null(self, key: str, default: float | None = None) -> float | None:
        value = self._get_or_null(key, "float")
        return None if value is None else float(value)

    # === Read-only mapping protocol ===

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __repr__(self) -> str:
        return f"ReadOnlyConfig(keys={list(self._data)!r})"
