import pytest

from fairdice.config import Config
from fairdice.crypto import SecureRandom
from fairdice.dice import Die
from fairdice.ui import GameUI

CLASSIC_SPECS = ["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"]


class FixedRandom(SecureRandom):
    """Hands out scripted integers and a constant key; records every draw."""

    def __init__(self, values, key_byte=0x01):
        self.values = list(values)
        self.key_byte = key_byte
        self.int_draws = []
        self.key_draws = 0

    def uniform_int(self, max_exclusive: int) -> int:
        value = self.values.pop(0)
        assert 0 <= value < max_exclusive, f"scripted {value} outside 0..{max_exclusive - 1}"
        self.int_draws.append((max_exclusive, value))
        return value

    def generate_key(self, size: int = 32) -> bytes:
        self.key_draws += 1
        return bytes([self.key_byte]) * size


class ScriptedUI(GameUI):
    """Feeds prepared lines to the engine and keeps everything it prints."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.output = []
        self.prompts = 0

    def read_line(self, prompt: str) -> str:
        self.prompts += 1
        if not self.lines:
            raise EOFError("script exhausted")
        return self.lines.pop(0)

    def display_message(self, text: str):
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def classic_dice():
    return [Die.parse(spec) for spec in CLASSIC_SPECS]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Config.load() writes class attributes; undo that after every test."""
    for name in ("FAIRDICE_KEY_SIZE", "FAIRDICE_LOG_LEVEL", "FAIRDICE_MIN_DICE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(Config, "KEY_SIZE", Config.KEY_SIZE)
    monkeypatch.setattr(Config, "LOG_LEVEL", Config.LOG_LEVEL)
