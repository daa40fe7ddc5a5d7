"""Passwords – algorithm cost parameters and their validation.

Each algorithm has its own frozen parameter set.  ``validate`` is pure: it
never raises, it returns ``Ok(params)`` or ``Err(ConfigError)`` listing every
offending field, so callers can reject weak configurations before any
expensive work begins.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import TYPE_CHECKING, Any, ClassVar, Iterator, Self

from credhash.config.validation import ConfigError
from credhash.kernel.ddd import ValueObject
from credhash.kernel.types import Err, Ok, Result

if TYPE_CHECKING:
    from credhash.config.settings import HasherSettings

PBKDF2 = "pbkdf2"
BCRYPT = "bcrypt"
SCRYPT = "scrypt"
ALGORITHMS: frozenset[str] = frozenset({PBKDF2, BCRYPT, SCRYPT})

BCRYPT_MIN_WORK_FACTOR = 4
BCRYPT_MAX_WORK_FACTOR = 31
SCRYPT_BLOCK_BYTES = 128
SCRYPT_MAX_PR = 2**30
# Largest value any encoded parameter may take; tokens carry at most ten digits.
MAX_PARAMETER = 2**32 - 1


@dataclasses.dataclass(frozen=True)
class HashingPolicy:
    """Security floor and resource ceiling applied by ``validate``."""

    min_pbkdf2_iterations: int = 10_000
    max_scrypt_memory_bytes: int = 128 * 1024 * 1024
    salt_length: int = 16

    @classmethod
    def from_settings(cls, settings: HasherSettings) -> HashingPolicy:
        return cls(
            min_pbkdf2_iterations=settings.min_pbkdf2_iterations,
            max_scrypt_memory_bytes=settings.max_scrypt_memory_bytes,
            salt_length=settings.salt_length,
        )


DEFAULT_POLICY = HashingPolicy()


def _problem(field: str, value: Any, reason: str) -> dict[str, Any]:
    return {"field": field, "value": value, "reason": reason}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _positive(field: str, value: Any) -> Iterator[dict[str, Any]]:
    if not _is_int(value):
        yield _problem(field, value, "must be an integer")
    elif value <= 0:
        yield _problem(field, value, "must be positive")
    elif value > MAX_PARAMETER:
        yield _problem(field, value, f"must not exceed {MAX_PARAMETER}")


@dataclasses.dataclass(frozen=True)
class ParameterSet(ValueObject, abc.ABC):
    """Base of the tagged parameter variants."""

    algorithm: ClassVar[str]

    def validate(self, policy: HashingPolicy | None = None) -> Result[Self, ConfigError]:
        problems = list(self._problems(policy or DEFAULT_POLICY))
        if problems:
            summary = "; ".join(f"{p['field']} {p['reason']}" for p in problems)
            return Err(ConfigError(f"Invalid {self.algorithm} parameters: {summary}", errors=problems))
        return Ok(self)

    def values(self) -> tuple[int, ...]:
        """Field values in their encoded order."""
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))

    @abc.abstractmethod
    def _problems(self, policy: HashingPolicy) -> Iterator[dict[str, Any]]: ...


@dataclasses.dataclass(frozen=True)
class Pbkdf2Parameters(ParameterSet):
    """PBKDF2 with HMAC-SHA-256 as the pseudorandom function."""

    algorithm: ClassVar[str] = PBKDF2
    prf: ClassVar[str] = "hmac-sha256"

    iterations: int
    derived_key_length: int = 32

    def _problems(self, policy: HashingPolicy) -> Iterator[dict[str, Any]]:
        iteration_problems = list(_positive("iterations", self.iterations))
        yield from iteration_problems
        if not iteration_problems and self.iterations < policy.min_pbkdf2_iterations:
            yield _problem(
                "iterations",
                self.iterations,
                f"below the minimum of {policy.min_pbkdf2_iterations}",
            )
        yield from _positive("derived_key_length", self.derived_key_length)


@dataclasses.dataclass(frozen=True)
class BcryptParameters(ParameterSet):
    """bcrypt; ``work_factor`` is the base-2 log of the round count."""

    algorithm: ClassVar[str] = BCRYPT

    work_factor: int = 12

    def _problems(self, policy: HashingPolicy) -> Iterator[dict[str, Any]]:  # noqa: ARG002
        if not _is_int(self.work_factor):
            yield _problem("work_factor", self.work_factor, "must be an integer")
        elif not BCRYPT_MIN_WORK_FACTOR <= self.work_factor <= BCRYPT_MAX_WORK_FACTOR:
            yield _problem(
                "work_factor",
                self.work_factor,
                f"outside [{BCRYPT_MIN_WORK_FACTOR}, {BCRYPT_MAX_WORK_FACTOR}]",
            )


@dataclasses.dataclass(frozen=True)
class ScryptParameters(ParameterSet):
    """scrypt; memory use is ``n * r * 128`` bytes."""

    algorithm: ClassVar[str] = SCRYPT

    n: int = 2**15
    r: int = 8
    p: int = 1
    derived_key_length: int = 32

    @property
    def memory_bytes(self) -> int:
        return self.n * self.r * SCRYPT_BLOCK_BYTES

    def _problems(self, policy: HashingPolicy) -> Iterator[dict[str, Any]]:
        n_ok = False
        if not _is_int(self.n):
            yield _problem("n", self.n, "must be an integer")
        elif self.n < 2 or self.n & (self.n - 1):
            yield _problem("n", self.n, "must be a power of two >= 2")
        elif self.n > MAX_PARAMETER:
            yield _problem("n", self.n, f"must not exceed {MAX_PARAMETER}")
        else:
            n_ok = True
        r_problems = list(_positive("r", self.r))
        yield from r_problems
        p_problems = list(_positive("p", self.p))
        yield from p_problems
        if not r_problems and not p_problems and self.p * self.r >= SCRYPT_MAX_PR:
            yield _problem("p", self.p, "p * r must be below 2**30")
        yield from _positive("derived_key_length", self.derived_key_length)
        if n_ok and not r_problems and self.memory_bytes > policy.max_scrypt_memory_bytes:
            yield _problem(
                "n",
                self.n,
                f"n * r * 128 = {self.memory_bytes} bytes exceeds the "
                f"ceiling of {policy.max_scrypt_memory_bytes}",
            )


PARAMETER_TYPES: dict[str, type[ParameterSet]] = {
    PBKDF2: Pbkdf2Parameters,
    BCRYPT: BcryptParameters,
    SCRYPT: ScryptParameters,
}


def default_parameters(algorithm: str, settings: HasherSettings | None = None) -> ParameterSet:
    """Return the recommended parameters for *algorithm*.

    With *settings*, the configured defaults are used instead of the built-in
    ones.  The result is not validated here; settings validate themselves on
    construction.

    Raises
    ------
    ConfigError
        When *algorithm* is not a known tag.
    """
    if settings is None:
        if algorithm not in PARAMETER_TYPES:
            raise _unknown_algorithm(algorithm)
        if algorithm == PBKDF2:
            return Pbkdf2Parameters(iterations=600_000)
        return PARAMETER_TYPES[algorithm]()
    if algorithm == PBKDF2:
        return Pbkdf2Parameters(settings.pbkdf2_iterations, settings.pbkdf2_key_length)
    if algorithm == BCRYPT:
        return BcryptParameters(settings.bcrypt_work_factor)
    if algorithm == SCRYPT:
        return ScryptParameters(
            settings.scrypt_n, settings.scrypt_r, settings.scrypt_p, settings.scrypt_key_length
        )
    raise _unknown_algorithm(algorithm)


def _unknown_algorithm(algorithm: str) -> ConfigError:
    return ConfigError(
        f"Unknown algorithm {algorithm!r}",
        errors=[_problem("algorithm", algorithm, f"must be one of {sorted(ALGORITHMS)}")],
    )


__all__ = [
    "ALGORITHMS",
    "BCRYPT",
    "DEFAULT_POLICY",
    "MAX_PARAMETER",
    "PARAMETER_TYPES",
    "PBKDF2",
    "SCRYPT",
    "BcryptParameters",
    "HashingPolicy",
    "ParameterSet",
    "Pbkdf2Parameters",
    "ScryptParameters",
    "default_parameters",
]
