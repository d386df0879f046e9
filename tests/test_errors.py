"""Tests for the kernelconfig error hierarchy."""

from __future__ import annotations

import pytest

from kernelconfig.errors import (
    ConfigurationError,
    ErrorCodes,
    InvalidConfigTree,
    InvalidConfigValue,
    MissingConfigKey,
)


class TestMissingConfigKey:
    def test_message_names_key(self) -> None:
        err = MissingConfigKey("bar")
        assert err.message == "The key [bar] does not exist in the configuration."
        assert err.key == "bar"

    def test_str_includes_code(self) -> None:
        err = MissingConfigKey("x")
        assert str(err) == "[CONFIG_KEY_MISSING] The key [x] does not exist in the configuration."

    def test_is_configuration_error(self) -> None:
        assert isinstance(MissingConfigKey("x"), ConfigurationError)


class TestInvalidConfigValue:
    def test_details(self) -> None:
        err = InvalidConfigValue(key="baz", expected="string", actual="int")
        assert err.code == ErrorCodes.CONFIG_VALUE_INVALID
        assert err.key == "baz"
        assert err.expected == "string"
        assert err.actual == "int"
        assert "[baz]" in err.message

    def test_cause_is_kept(self) -> None:
        cause = ValueError("boom")
        err = InvalidConfigValue(key="k", expected="integer", actual="str", cause=cause)
        assert err.cause is cause


class TestInvalidConfigTree:
    def test_path_and_reason(self) -> None:
        err = InvalidConfigTree(path="a.b", reason="unsupported value type bytes")
        assert err.code == ErrorCodes.CONFIG_TREE_INVALID
        assert err.path == "a.b"
        assert "a.b" in str(err)

    def test_properties_are_documented(self) -> None:
        for prop in (InvalidConfigTree.path, InvalidConfigValue.key, MissingConfigKey.key):
            assert prop.__doc__


class TestConfigurationError:
    def test_defaults(self) -> None:
        err = ConfigurationError(code="CUSTOM", message="custom failure")
        assert err.details == {}
        assert err.cause is None
        assert err.timestamp

    def test_raisable(self) -> None:
        with pytest.raises(ConfigurationError, match="custom failure"):
            raise ConfigurationError(code="CUSTOM", message="custom failure")


class TestErrorCodes:
    def test_codes_match_errors(self) -> None:
        assert MissingConfigKey("k").code == ErrorCodes.CONFIG_KEY_MISSING
        assert InvalidConfigTree(path="p", reason="r").code == ErrorCodes.CONFIG_TREE_INVALID

    def test_instance_is_immutable(self) -> None:
        codes = ErrorCodes()
        with pytest.raises(AttributeError, match="immutable"):
            codes.CONFIG_KEY_MISSING = "OTHER"
