import logging
import sys

from fairdice.config import config
from fairdice.dice import DiceParser
from fairdice.engine import GameEngine
from fairdice.errors import ConfigurationError, GameExit, ProtocolError
from fairdice.ui import ConsoleUI


def setup_logging() -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def main(argv: list[str] | None = None) -> int:
    logger = logging.getLogger(__name__)

    # Dynamically determine the command used to invoke the script
    if 'py.exe' in sys.executable.lower():
        ConfigurationError.set_invocation_command('py')
    else:
        ConfigurationError.set_invocation_command('python')

    args = sys.argv[1:] if argv is None else argv
    ui = ConsoleUI()
    try:
        config.load()
        setup_logging()
        dice = DiceParser.parse(args)
        ui.display_message("--- Welcome to the Non-Transitive Dice Game! ---")
        engine = GameEngine(dice, ui)
        result = engine.run()
        logger.info(f"Game finished: {result.outcome.value}")
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1
    except (GameExit, KeyboardInterrupt, EOFError):
        ui.display_message("\nExiting game. Goodbye!")
        return 0
    except (ProtocolError, OSError) as e:
        logger.debug("Fair random protocol failed", exc_info=True)
        print(f"\nFatal error: the game cannot continue fairly ({e}).", file=sys.stderr)
        return 2
    return 0
