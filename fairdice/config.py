"""
Game configuration loaded from environment variables (and a local .env file).
"""
import os

from dotenv import load_dotenv

from fairdice.crypto import DEFAULT_KEY_SIZE, MIN_KEY_SIZE
from fairdice.errors import ConfigurationError

load_dotenv()


class Config:
    """Game configuration."""

    # Logging
    LOG_LEVEL: str = os.getenv("FAIRDICE_LOG_LEVEL", "WARNING")

    # Commit/reveal
    KEY_SIZE: int = DEFAULT_KEY_SIZE

    # Game settings
    MIN_DICE: int = 3

    @classmethod
    def load(cls) -> "Config":
        """Read the environment. Bad values raise ConfigurationError."""
        cls.LOG_LEVEL = os.getenv("FAIRDICE_LOG_LEVEL", "WARNING")

        raw = os.getenv("FAIRDICE_KEY_SIZE", str(DEFAULT_KEY_SIZE)).strip()
        try:
            key_size = int(raw)
        except ValueError:
            raise ConfigurationError(f"FAIRDICE_KEY_SIZE must be an integer, got '{raw}'.") from None
        if key_size < MIN_KEY_SIZE:
            raise ConfigurationError(
                f"FAIRDICE_KEY_SIZE must be at least {MIN_KEY_SIZE} bytes, got {key_size}."
            )
        cls.KEY_SIZE = key_size
        return cls()


config = Config()
