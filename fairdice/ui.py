"""
Line-oriented I/O for the game.

The engine only talks to a ``GameUI``; ``ConsoleUI`` wires it to the terminal,
tests wire it to a script.
"""
import re

from fairdice.errors import GameExit, InvalidInput

_CHOICE_RE = re.compile(r"[0-9]+")

HELP = "?"
EXIT_COMMANDS = ("x", "exit")
HELP_COMMANDS = ("?", "help")


def parse_choice(raw: str, option_count: int, allow_help: bool = True) -> int | str:
    choice = raw.strip().lower()
    if choice in EXIT_COMMANDS:
        raise GameExit()
    if choice in HELP_COMMANDS and allow_help:
        return HELP
    if _CHOICE_RE.fullmatch(choice):
        choice_int = int(choice)
        if 0 <= choice_int < option_count:
            return choice_int
    raise InvalidInput(
        f"Invalid choice '{raw.strip()}'. Please enter a number between 0 and "
        f"{option_count - 1}, '?' for help, or 'X' to exit."
    )


class GameUI:
    """Base UI. Subclasses supply ``read_line`` and ``display_message``."""

    def read_line(self, prompt: str) -> str:
        raise NotImplementedError

    def display_message(self, text: str):
        raise NotImplementedError

    def display_hmac(self, hmac_hex: str, max_val: int):
        self.display_message(f"I have chosen a random value in range 0..{max_val - 1} (HMAC={hmac_hex}).")

    def display_key_and_move(self, key_hex: str, move: int, name: str = "My choice"):
        self.display_message(f"{name}: {move} (KEY={key_hex}).")

    def display_throw_result(self, value: int, contribution: int, sides: int, result: int):
        self.display_message(
            f"Fair random number result: ({value} + {contribution}) mod {sides} = {result}"
        )

    def get_user_choice(self, prompt: str, options: list[str], allow_help: bool = True) -> int | str:
        """
        Show the numbered options and read until a valid line arrives.

        Returns the option index, or ``HELP``. Raises ``GameExit`` on 'X'/'exit'.
        """
        while True:
            self.display_message(f"\n{prompt}")
            for i, option in enumerate(options):
                self.display_message(f" {i} - {option}")

            self.display_message(" X - Exit")
            if allow_help:
                self.display_message(" ? - Help")

            try:
                return parse_choice(self.read_line("Your choice: "), len(options), allow_help)
            except InvalidInput as e:
                self.display_message(str(e))


class ConsoleUI(GameUI):
    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def display_message(self, text: str):
        print(text)
