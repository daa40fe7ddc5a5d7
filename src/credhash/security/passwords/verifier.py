from __future__ import annotations

import hmac

from credhash.security.passwords.encoding import EncodedCredential
from credhash.security.passwords.kdf import BCRYPT_MAX_PASSWORD_BYTES, derive
from credhash.security.passwords.params import BCRYPT, HashingPolicy

__all__ = ["Verifier"]


class Verifier:
    """Recomputes the derived key for a candidate and compares in constant time."""

    def __init__(self, policy: HashingPolicy | None = None) -> None:
        self._policy = policy

    def verify(self, candidate: bytes, stored: EncodedCredential) -> bool:
        if stored.algorithm == BCRYPT and len(candidate) > BCRYPT_MAX_PASSWORD_BYTES:
            # No bcrypt credential can have been made from such a password.
            return False
        recomputed = derive(candidate, stored.salt, stored.parameters, policy=self._policy)
        # compare_digest does not stop at the first differing byte; a length
        # mismatch returns False without inspecting content.
        return hmac.compare_digest(recomputed, stored.derived_key)
