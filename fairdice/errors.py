import sys


class ConfigurationError(Exception):
    """
    Raised when the dice given on the command line cannot start a game.
    The string form carries an example of correct usage.
    """
    _invocation_command = "python"

    @staticmethod
    def set_invocation_command(command: str):
        """Sets the command used to run the script (e.g., 'python' or 'py')."""
        ConfigurationError._invocation_command = command

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        script_name = sys.argv[0] if sys.argv else 'game.py'
        example = (
            f"{ConfigurationError._invocation_command} {script_name} "
            f"2,2,4,4,9,9 1,1,6,6,8,8 3,3,5,5,7,7"
        )
        return f"\nConfiguration Error: {self.message}\n\nExample usage:\n{example}\n"

    @classmethod
    def not_enough_dice(cls, minimum: int) -> "ConfigurationError":
        return cls(f"Please specify at least {minimum} dice.")

    @classmethod
    def invalid_die(cls, position: int, spec: str, reason: str) -> "ConfigurationError":
        return cls(f"Die #{position} ('{spec}') is invalid: {reason}")


class InvalidDiceSpec(ValueError):
    """A single die's comma-separated face list could not be parsed."""


class InvalidInput(ValueError):
    """Interactive input outside the expected grammar or range. Always recoverable."""


class ProtocolError(RuntimeError):
    """The commit/reveal sequence was used out of order."""


class GameExit(Exception):
    """The user asked to leave the game."""
