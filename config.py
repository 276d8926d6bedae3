"""Configuration for the blackjack round."""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GameConfig:
    """
    Fixed table constants for a single round.

    These are not rule options: the round engine always reads the global
    instance, and no command line or environment setting changes them.
    """

    player_initial_cards: int = 2
    dealer_initial_cards: int = 2
    player_stands_at: int = 17

    def __post_init__(self) -> None:
        """Validate the constants."""
        if self.player_initial_cards < 1:
            raise ValueError("player_initial_cards must be at least 1")
        if self.dealer_initial_cards < 1:
            raise ValueError("dealer_initial_cards must be at least 1")
        if not 1 <= self.player_stands_at <= 21:
            raise ValueError("player_stands_at must be between 1 and 21")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration (log records go to stderr)."""

    level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
