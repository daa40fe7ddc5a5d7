"""Security – password hashing (PBKDF2, bcrypt, scrypt)."""
from credhash.security.passwords.encoding import EncodedCredential, Encoder, decode, encode
from credhash.security.passwords.hasher import (
    CredentialHasher,
    get_default_hasher,
    hash_password,
    verify_password,
)
from credhash.security.passwords.kdf import derive
from credhash.security.passwords.params import (
    ALGORITHMS,
    BcryptParameters,
    HashingPolicy,
    ParameterSet,
    Pbkdf2Parameters,
    ScryptParameters,
    default_parameters,
)
from credhash.security.passwords.salt import SaltGenerator
from credhash.security.passwords.verifier import Verifier

__all__ = [
    "ALGORITHMS",
    "BcryptParameters",
    "CredentialHasher",
    "EncodedCredential",
    "Encoder",
    "HashingPolicy",
    "ParameterSet",
    "Pbkdf2Parameters",
    "SaltGenerator",
    "ScryptParameters",
    "Verifier",
    "decode",
    "default_parameters",
    "derive",
    "encode",
    "get_default_hasher",
    "hash_password",
    "verify_password",
]
