"""
Game sequencing: who moves first, dice selection, both throws and the result.

Each step that needs randomness runs its own commit/reveal round. The HMAC is
shown before the user answers and the secret is revealed only afterwards.
"""
import logging
from dataclasses import dataclass
from enum import Enum

from fairdice.config import config
from fairdice.crypto import MIN_KEY_SIZE, SecureRandom
from fairdice.dice import Die
from fairdice.errors import ProtocolError
from fairdice.probability import HelpTableGenerator
from fairdice.protocol import Commitable, FairRandomProtocol
from fairdice.ui import HELP, GameUI

logger = logging.getLogger(__name__)


class GamePhase(str, Enum):
    DETERMINE_FIRST_MOVE = "DETERMINE_FIRST_MOVE"
    DICE_SELECTION = "DICE_SELECTION"
    COMPUTER_THROW = "COMPUTER_THROW"
    USER_THROW = "USER_THROW"
    RESULT = "RESULT"


class Outcome(str, Enum):
    USER_WIN = "USER_WIN"
    COMPUTER_WIN = "COMPUTER_WIN"
    TIE = "TIE"


@dataclass(frozen=True)
class ThrowResult:
    """One fair throw, with everything needed to verify it afterwards."""
    die_index: int
    sides: int
    hmac: str
    value: int
    key: str
    contribution: int
    face_index: int
    face: int


@dataclass
class GameState:
    user_goes_first: bool | None = None
    user_die_index: int | None = None
    computer_die_index: int | None = None
    computer_throw: ThrowResult | None = None
    user_throw: ThrowResult | None = None


@dataclass(frozen=True)
class GameResult:
    state: GameState
    outcome: Outcome

    @property
    def user_face(self) -> int:
        return self.state.user_throw.face

    @property
    def computer_face(self) -> int:
        return self.state.computer_throw.face


def compare_faces(user_face: int, computer_face: int) -> Outcome:
    if user_face > computer_face:
        return Outcome.USER_WIN
    if computer_face > user_face:
        return Outcome.COMPUTER_WIN
    return Outcome.TIE


class GameEngine:
    def __init__(self, dice: list[Die], ui: GameUI, rng: SecureRandom | None = None,
                 key_size: int | None = None):
        if len(dice) < 2:
            raise ValueError("At least two dice are needed to play.")
        self.dice = list(dice)
        self.ui = ui
        self.rng = rng or SecureRandom()
        self.key_size = config.KEY_SIZE if key_size is None else key_size
        if self.key_size < MIN_KEY_SIZE:
            raise ValueError(f"Key size must be at least {MIN_KEY_SIZE} bytes, got {self.key_size}.")
        self.phase = GamePhase.DETERMINE_FIRST_MOVE
        self.state = GameState()
        self._handlers = {
            GamePhase.DETERMINE_FIRST_MOVE: self._determine_first_move,
            GamePhase.DICE_SELECTION: self._select_dice,
            GamePhase.COMPUTER_THROW: self._computer_throw,
            GamePhase.USER_THROW: self._user_throw,
        }

    def run(self) -> GameResult:
        while self.phase is not GamePhase.RESULT:
            self.step()
        return self.result()

    def step(self) -> GamePhase:
        """Run the current phase to completion and move to the next one."""
        handler = self._handlers.get(self.phase)
        if handler is None:
            raise ProtocolError("The game is already over.")
        previous = self.phase
        self.phase = handler()
        logger.debug(f"Phase {previous.value} -> {self.phase.value}")
        return self.phase

    def result(self) -> GameResult:
        if self.phase is not GamePhase.RESULT:
            raise ProtocolError(f"No result yet, the game is in phase {self.phase.value}.")
        outcome = compare_faces(self.state.user_throw.face, self.state.computer_throw.face)
        return GameResult(state=self.state, outcome=outcome)

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _determine_first_move(self) -> GamePhase:
        self.ui.display_message("\nLet's determine who makes the first move.")
        protocol = self._new_round(2)
        self.ui.display_hmac(protocol.commitment_digest(), 2)

        guess = self._ask("Try to guess my selection.", ["0", "1"])

        revealed = protocol.reveal()
        self.ui.display_key_and_move(revealed.key, revealed.value, name="My selection")
        self.state.user_goes_first = guess == revealed.value
        logger.info(f"First move decided: user_goes_first={self.state.user_goes_first}")
        return GamePhase.DICE_SELECTION

    def _select_dice(self) -> GamePhase:
        all_indices = list(range(len(self.dice)))
        if self.state.user_goes_first:
            self.ui.display_message("You make the first move and choose the dice.")
            user_index = self._choose_user_die(all_indices)
            remaining = [i for i in all_indices if i != user_index]
            computer_index = remaining[self.rng.uniform_int(len(remaining))]
            self.ui.display_message(f"I choose the [{self.dice[computer_index]}] dice.")
        else:
            self.ui.display_message("I make the first move and choose the dice.")
            computer_index = self.rng.uniform_int(len(self.dice))
            self.ui.display_message(f"I choose the [{self.dice[computer_index]}] dice.")
            remaining = [i for i in all_indices if i != computer_index]
            user_index = self._choose_user_die(remaining)

        self.state.user_die_index = user_index
        self.state.computer_die_index = computer_index
        self.ui.display_message(f"\nYour die: [{self.dice[user_index]}]")
        self.ui.display_message(f"My die:   [{self.dice[computer_index]}]")
        return GamePhase.COMPUTER_THROW

    def _computer_throw(self) -> GamePhase:
        self.ui.display_message("\nIt's time for my throw.")
        throw = self._throw(self.state.computer_die_index)
        self.state.computer_throw = throw
        self.ui.display_message(f"My throw is {throw.face}.")
        return GamePhase.USER_THROW

    def _user_throw(self) -> GamePhase:
        self.ui.display_message("\nIt's time for your throw.")
        throw = self._throw(self.state.user_die_index)
        self.state.user_throw = throw
        self.ui.display_message(f"Your throw is {throw.face}.")
        self._announce_outcome()
        return GamePhase.RESULT

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _new_round(self, range_: int) -> Commitable:
        return FairRandomProtocol(range_, rng=self.rng, key_size=self.key_size)

    def _throw(self, die_index: int) -> ThrowResult:
        die = self.dice[die_index]
        sides = die.sides()
        protocol = self._new_round(sides)
        digest = protocol.commitment_digest()
        self.ui.display_hmac(digest, sides)

        contribution = self._ask(f"Add your number modulo {sides}.", [str(i) for i in range(sides)])

        revealed = protocol.reveal()
        face_index = (revealed.value + contribution) % sides
        self.ui.display_key_and_move(revealed.key, revealed.value, name="My number")
        self.ui.display_throw_result(revealed.value, contribution, sides, face_index)
        return ThrowResult(
            die_index=die_index,
            sides=sides,
            hmac=digest,
            value=revealed.value,
            key=revealed.key,
            contribution=contribution,
            face_index=face_index,
            face=die.get_face(face_index),
        )

    def _choose_user_die(self, available: list[int]) -> int:
        options = [str(self.dice[i]) for i in available]
        return available[self._ask("Choose your dice:", options)]

    def _ask(self, prompt: str, options: list[str]) -> int:
        while True:
            choice = self.ui.get_user_choice(prompt, options, allow_help=True)
            if choice == HELP:
                self._show_help()
                continue
            return choice

    def _show_help(self):
        self.ui.display_message(HelpTableGenerator.rules_text())
        self.ui.display_message(HelpTableGenerator.generate_table(self.dice))

    def _announce_outcome(self):
        user_face = self.state.user_throw.face
        computer_face = self.state.computer_throw.face
        self.ui.display_message("\n--- Results ---")
        outcome = compare_faces(user_face, computer_face)
        if outcome is Outcome.USER_WIN:
            self.ui.display_message(f"You win ({user_face} > {computer_face})!")
        elif outcome is Outcome.COMPUTER_WIN:
            self.ui.display_message(f"I win ({computer_face} > {user_face})!")
        else:
            self.ui.display_message(f"It's a tie ({user_face} = {computer_face})!")
