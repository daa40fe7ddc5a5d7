"""conftest.py for benchmarks.

Run explicitly with ``pytest tests/benchmarks``.  Parameters are the
production defaults so the numbers show the real cost of a login.
"""

from __future__ import annotations

import pytest

from credhash.security.passwords import CredentialHasher, default_parameters


@pytest.fixture(scope="session")
def hasher() -> CredentialHasher:
    return CredentialHasher()


@pytest.fixture(scope="session", params=["pbkdf2", "bcrypt", "scrypt"])
def production_params(request):
    return default_parameters(request.param)
