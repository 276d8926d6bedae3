"""Main entry point: play one round of blackjack on the console."""

import sys

from console_ui.renderer import ConsoleRenderer
from core.game.engine import BlackjackRound
from logging_utils import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> int:
    """Play a single round and print it. Always exits with status 0."""
    setup_logging()

    round_ = BlackjackRound()
    ConsoleRenderer().attach(round_)
    result = round_.play()

    logger.debug("Exiting after %s", result.outcome.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
