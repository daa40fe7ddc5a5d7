"""
credhash – password hashing and verification core.

Import path convention::

    from credhash import CredentialHasher, hash_password, verify_password
    from credhash.security.passwords import Pbkdf2Parameters, ScryptParameters
    from credhash.kernel.errors import FormatError
    from credhash.config.validation import ConfigError
"""

from credhash.security.passwords import (
    CredentialHasher,
    default_parameters,
    hash_password,
    verify_password,
)

__version__ = "0.1.0"
__all__ = [
    "CredentialHasher",
    "__version__",
    "default_parameters",
    "hash_password",
    "verify_password",
]
