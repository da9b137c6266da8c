import hashlib
import hmac
import secrets

DEFAULT_KEY_SIZE = 32
# commitments over 0..1 are only hiding with a full-size key
MIN_KEY_SIZE = 32


class SecureRandom:
    """Key and integer generation backed by the OS CSPRNG (``secrets``)."""

    def generate_key(self, size: int = DEFAULT_KEY_SIZE) -> bytes:
        return secrets.token_bytes(size)

    def uniform_int(self, max_exclusive: int) -> int:
        # randbelow rejection-samples, so small ranges carry no modulo bias
        if max_exclusive < 1:
            raise ValueError(f"Range must be at least 1, got {max_exclusive}.")
        return secrets.randbelow(max_exclusive)


def calculate_hmac(key: bytes, message: str) -> str:
    """HMAC-SHA256 of the UTF-8 message, as uppercase hex without separators."""
    h = hmac.new(key, message.encode('utf-8'), hashlib.sha256)
    return h.hexdigest().upper()


def verify_commitment(digest: str, key_hex: str, value: int) -> bool:
    """
    Check a revealed (key, value) pair against a previously published digest.
    Anyone holding the three printed values can run this after the game.
    """
    try:
        key = bytes.fromhex(key_hex)
    except ValueError:
        return False
    return hmac.compare_digest(calculate_hmac(key, str(value)), digest.upper())
