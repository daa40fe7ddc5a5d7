"""Unit tests for the kernel error hierarchy and Result type."""

from __future__ import annotations

import json

import pytest

from credhash.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from credhash.kernel.errors import (
    BaseError,
    DerivationError,
    DomainError,
    EntropySourceError,
    FormatError,
    InfrastructureError,
    ValidationError,
)
from credhash.kernel.types import Err, Ok


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error_cls", "parent"),
        [
            (ConfigError, ValidationError),
            (ValidationError, DomainError),
            (FormatError, DomainError),
            (DerivationError, InfrastructureError),
            (EntropySourceError, InfrastructureError),
            (DomainError, BaseError),
            (InfrastructureError, BaseError),
        ],
    )
    def test_subclassing(self, error_cls: type, parent: type) -> None:
        assert issubclass(error_cls, parent)

    def test_setting_errors_are_config_errors(self) -> None:
        assert isinstance(MissingRequiredSettingError("X"), ConfigError)
        assert isinstance(InvalidSettingValueError("X", 1, "bad"), ConfigError)


class TestBaseError:
    def test_default_code(self) -> None:
        assert FormatError("x").code == "format_error"
        assert ConfigError("x").code == "config_error"
        assert DerivationError("x").code == "derivation_error"

    def test_custom_code(self) -> None:
        assert BaseError("x", code="custom").code == "custom"

    def test_str_is_json(self) -> None:
        payload = json.loads(str(FormatError("bad token", reason="field_count")))
        assert payload == {
            "code": "format_error",
            "message": "bad token",
            "detail": {},
            "reason": "field_count",
        }

    def test_cause_is_chained_by_type_name(self) -> None:
        cause = ValueError("secret material here")
        err = DerivationError("failed", algorithm="scrypt", cause=cause)
        assert err.__cause__ is cause
        assert err.to_dict()["cause"] == "ValueError"
        assert "secret material" not in str(err)

    def test_repr(self) -> None:
        assert repr(FormatError("oops")) == "FormatError(code='format_error', message='oops')"


class TestValidationError:
    def test_fields(self) -> None:
        err = ConfigError(
            "bad",
            errors=[
                {"field": "n", "value": 3, "reason": "must be a power of two >= 2"},
                {"field": "r", "value": 0, "reason": "must be positive"},
            ],
        )
        assert err.fields == ["n", "r"]
        assert err.to_dict()["errors"][1]["field"] == "r"

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("scrypt_n", 3, "must be a power of two")
        assert err.setting_name == "scrypt_n"
        assert err.fields == ["scrypt_n"]
        assert "scrypt_n" in err.message

    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("CREDHASH_ALGORITHM")
        assert err.setting_name == "CREDHASH_ALGORITHM"
        assert err.code == "missing_required_setting"


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class TestResult:
    def test_ok(self) -> None:
        result = Ok(5)
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == 5
        assert result.unwrap_or(0) == 5
        assert result.map(lambda v: v * 2) == Ok(10)

    def test_ok_unwrap_err_raises(self) -> None:
        with pytest.raises(ValueError):
            Ok(1).unwrap_err()

    def test_err(self) -> None:
        error = FormatError("bad")
        result = Err(error)
        assert result.is_err() and not result.is_ok()
        assert result.unwrap_or(0) == 0
        assert result.unwrap_err() is error
        assert result.map(lambda v: v * 2) is result

    def test_err_unwrap_raises_carried_error(self) -> None:
        with pytest.raises(FormatError):
            Err(FormatError("bad")).unwrap()
