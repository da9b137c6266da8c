"""
Commit/reveal rounds.

A round picks its secret value and key up front and publishes only the HMAC.
The counterparty then fixes its own input, and only after that is the secret
revealed, so neither side can adapt to the other.
"""
import logging
from enum import Enum
from typing import NamedTuple, Protocol

from fairdice.crypto import DEFAULT_KEY_SIZE, MIN_KEY_SIZE, SecureRandom, calculate_hmac
from fairdice.errors import ProtocolError

logger = logging.getLogger(__name__)


class Reveal(NamedTuple):
    value: int
    key: str


class ProtocolState(str, Enum):
    COMMITTED = "COMMITTED"
    REVEALED = "REVEALED"


class Commitable(Protocol):
    def commitment_digest(self) -> str:
        ...

    def reveal(self) -> Reveal:
        ...


class FairRandomProtocol:
    def __init__(self, range_: int, rng: SecureRandom | None = None,
                 key_size: int = DEFAULT_KEY_SIZE):
        if range_ < 1:
            raise ValueError(f"Range must be at least 1, got {range_}.")
        if key_size < MIN_KEY_SIZE:
            raise ValueError(f"Key size must be at least {MIN_KEY_SIZE} bytes, got {key_size}.")
        rng = rng or SecureRandom()
        self.range = range_
        self._value = rng.uniform_int(range_)
        self._key = rng.generate_key(key_size)
        self._hmac = calculate_hmac(self._key, str(self._value))
        self.state = ProtocolState.COMMITTED
        logger.debug(f"Committed to a value in 0..{range_ - 1} (HMAC={self._hmac})")

    def commitment_digest(self) -> str:
        return self._hmac

    def reveal(self) -> Reveal:
        if self.state is ProtocolState.REVEALED:
            raise ProtocolError("This round has already been revealed.")
        self.state = ProtocolState.REVEALED
        logger.debug(f"Revealed value {self._value} for HMAC={self._hmac}")
        return Reveal(self._value, self._key.hex().upper())
