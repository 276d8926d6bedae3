"""Console front end for the blackjack round."""

from console_ui.renderer import ConsoleRenderer

__all__ = ["ConsoleRenderer"]
