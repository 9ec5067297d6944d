"""
PIN hashing for account credentials.

PINs are stored as ``scrypt$<salt>$<hex digest>`` and checked with a
constant-time comparison. The plain PIN is never persisted or logged.
"""

import hashlib
import hmac
import secrets

HASH_SCHEME = "scrypt"
SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1


def _generate_salt() -> str:
    return secrets.token_hex(16)


def _scrypt(pin: str, salt: str) -> str:
    return hashlib.scrypt(pin.encode(), salt=salt.encode(), n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P).hex()


def hash_pin(pin: str) -> str:
    salt = _generate_salt()
    return f"{HASH_SCHEME}${salt}${_scrypt(pin, salt)}"


def verify_pin(pin: str, stored_hash: str) -> bool:
    """Return True when ``pin`` matches ``stored_hash``.

    Malformed or foreign hash strings never match.
    """
    if not pin or not stored_hash:
        return False
    parts = stored_hash.split("$")
    if len(parts) != 3 or parts[0] != HASH_SCHEME:
        return False
    _, salt, expected = parts
    return hmac.compare_digest(_scrypt(pin, salt), expected)
