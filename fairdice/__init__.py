"""
Provably fair non-transitive dice game.

Every random choice the computer makes is committed to with HMAC-SHA256
before the user answers and revealed afterwards for verification.
"""
from fairdice.crypto import SecureRandom, calculate_hmac, verify_commitment
from fairdice.dice import DiceParser, Die
from fairdice.engine import GameEngine, GamePhase, GameResult, GameState, Outcome, ThrowResult
from fairdice.errors import ConfigurationError, GameExit, InvalidDiceSpec, InvalidInput, ProtocolError
from fairdice.probability import HelpTableGenerator, ProbabilityCalculator
from fairdice.protocol import Commitable, FairRandomProtocol, ProtocolState, Reveal
from fairdice.ui import ConsoleUI, GameUI

__all__ = [
    "SecureRandom", "calculate_hmac", "verify_commitment",
    "DiceParser", "Die",
    "GameEngine", "GamePhase", "GameResult", "GameState", "Outcome", "ThrowResult",
    "ConfigurationError", "GameExit", "InvalidDiceSpec", "InvalidInput", "ProtocolError",
    "HelpTableGenerator", "ProbabilityCalculator",
    "Commitable", "FairRandomProtocol", "ProtocolState", "Reveal",
    "ConsoleUI", "GameUI",
]
