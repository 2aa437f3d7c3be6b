"""Password Hashing — pwdlib (argon2) with an application-wide pepper.

Invariants:
    - Only hashes are persisted; verification never raises on malformed hashes
    - verify_against_dummy() does the same work as a real verification so an
      unknown email takes as long as a wrong password
"""

from functools import lru_cache

from pwdlib import PasswordHash
from pwdlib.exceptions import PwdlibError

_password_hash = PasswordHash.recommended()


class PasswordHasher:
    """Hash and verify peppered passwords."""

    def __init__(self, pepper: str = ""):
        self._pepper = pepper

    def hash(self, plain_password: str) -> str:
        return _password_hash.hash(plain_password + self._pepper)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        try:
            return _password_hash.verify(
                plain_password + self._pepper, hashed_password,
            )
        except PwdlibError:
            return False

    def verify_against_dummy(self, plain_password: str) -> bool:
        """Burn one verification for an account that does not exist. Always False."""
        self.verify(plain_password, _dummy_hash())
        return False


@lru_cache
def _dummy_hash() -> str:
    return _password_hash.hash("wordbank-timing-equalizer")
