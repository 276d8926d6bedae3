"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEALING_INITIAL → PLAYER_DRAWING → COMPARISON → DONE
    """

    # Opening cards for player and dealer
    DEALING_INITIAL = auto()

    # Player takes cards until standing, busting or the deck runs out
    PLAYER_DRAWING = auto()

    # Scores compared, outcome announced
    COMPARISON = auto()

    # Terminal, nothing is kept afterwards
    DONE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    RoundState.DEALING_INITIAL: [RoundState.PLAYER_DRAWING],
    RoundState.PLAYER_DRAWING: [RoundState.COMPARISON],
    RoundState.COMPARISON: [RoundState.DONE],
    RoundState.DONE: [],
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
