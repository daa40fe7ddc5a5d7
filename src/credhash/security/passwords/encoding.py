"""Passwords – self-describing credential tokens.

Token layout (one line, ``$`` separated)::

    <algorithm>$<param>[,<param>...]$<base64 salt>$<base64 derived key>

    pbkdf2$600000,32$<salt>$<key>
    bcrypt$12$<salt>$<key>
    scrypt$32768,8,1,32$<salt>$<key>

bcrypt is folded into the same four fields: its 16-byte salt and 23-byte
checksum are stored as plain base64 rather than in bcrypt's ``$2b$`` form.
The leading tag selects the parameter parser, so new algorithms can be added
without breaking tokens stored earlier.
"""
from __future__ import annotations

import base64
import binascii
import dataclasses
import re

from credhash.kernel.ddd import ValueObject
from credhash.kernel.errors import FormatError
from credhash.kernel.types import Err, Ok, Result
from credhash.security.passwords.kdf import BCRYPT_SALT_LENGTH, expected_key_length
from credhash.security.passwords.params import (
    BCRYPT,
    PARAMETER_TYPES,
    HashingPolicy,
    ParameterSet,
)

__all__ = [
    "DELIMITER",
    "PARAM_SEPARATOR",
    "EncodedCredential",
    "Encoder",
    "decode",
    "encode",
]

DELIMITER = "$"
PARAM_SEPARATOR = ","
_FIELD_COUNT = 4
# Ten digits covers MAX_PARAMETER, the upper bound validate() enforces.
_INTEGER = re.compile(r"0|[1-9][0-9]{0,9}")


@dataclasses.dataclass(frozen=True, repr=False)
class EncodedCredential(ValueObject):
    """Result of one hash operation: parameters, salt and derived key."""

    parameters: ParameterSet
    salt: bytes
    derived_key: bytes

    @property
    def algorithm(self) -> str:
        return self.parameters.algorithm

    def __repr__(self) -> str:
        return f"EncodedCredential(algorithm={self.algorithm!r}, parameters={self.parameters!r})"


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


class Encoder:
    """Serialises :class:`EncodedCredential` values and parses them back.

    ``decode`` never raises on bad input; it returns ``Err(FormatError)``.
    Parsed parameters are validated against *policy*.
    """

    def __init__(self, policy: HashingPolicy | None = None) -> None:
        self._policy = policy

    def encode(self, credential: EncodedCredential) -> str:
        params = PARAM_SEPARATOR.join(str(v) for v in credential.parameters.values())
        return DELIMITER.join(
            (credential.algorithm, params, _b64(credential.salt), _b64(credential.derived_key))
        )

    def decode(self, token: str) -> Result[EncodedCredential, FormatError]:
        if not isinstance(token, str):
            return Err(FormatError("Credential token must be a string", reason="type"))
        fields = token.split(DELIMITER)
        if len(fields) != _FIELD_COUNT:
            return Err(
                FormatError(
                    f"Expected {_FIELD_COUNT} fields, got {len(fields)}",
                    reason="field_count",
                )
            )
        tag, raw_params, raw_salt, raw_key = fields

        params_cls = PARAMETER_TYPES.get(tag)
        if params_cls is None:
            return Err(FormatError("Unknown algorithm tag", reason="unknown_algorithm"))

        parsed = self._parse_parameters(params_cls, raw_params)
        if parsed.is_err():
            return parsed
        params = parsed.value

        salt = self._parse_base64(raw_salt)
        key = self._parse_base64(raw_key)
        if salt is None or key is None:
            return Err(FormatError("Salt or key is not valid base64", reason="bad_base64"))
        if not salt or (params.algorithm == BCRYPT and len(salt) != BCRYPT_SALT_LENGTH):
            return Err(FormatError("Salt has an invalid length", reason="bad_salt"))
        if len(key) != expected_key_length(params):
            return Err(
                FormatError(
                    "Derived key length does not match the parameters",
                    reason="bad_key_length",
                )
            )
        return Ok(EncodedCredential(parameters=params, salt=salt, derived_key=key))

    def _parse_parameters(
        self, params_cls: type[ParameterSet], raw: str
    ) -> Result[ParameterSet, FormatError]:
        parts = raw.split(PARAM_SEPARATOR)
        expected = len(dataclasses.fields(params_cls))
        if len(parts) != expected:
            return Err(
                FormatError(
                    f"{params_cls.algorithm} expects {expected} parameters, got {len(parts)}",
                    reason="parameter_count",
                )
            )
        if not all(_INTEGER.fullmatch(p) for p in parts):
            return Err(FormatError("Parameters must be decimal integers", reason="bad_parameter"))
        params = params_cls(*(int(p) for p in parts))
        checked = params.validate(self._policy)
        if checked.is_err():
            return Err(
                FormatError(
                    f"Stored {params_cls.algorithm} parameters are invalid",
                    reason="invalid_parameters",
                    cause=checked.error,
                )
            )
        return Ok(params)

    @staticmethod
    def _parse_base64(raw: str) -> bytes | None:
        try:
            return base64.b64decode(raw.encode("ascii"), validate=True)
        except (binascii.Error, UnicodeEncodeError):
            return None


_default_encoder = Encoder()


def encode(credential: EncodedCredential) -> str:
    return _default_encoder.encode(credential)


def decode(token: str) -> Result[EncodedCredential, FormatError]:
    return _default_encoder.decode(token)
