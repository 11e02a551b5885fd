"""
Keeps one GameState per browser session.
The state is stored in the Flask session as a JSON-safe dict and written
back by an observer whenever it changes.
"""
import logging

from flask import session

from morpion.game.core.game_state import GameState

logger = logging.getLogger(__name__)

SESSION_KEY = "tic_tac_toe"
ORDER_KEY = "tic_tac_toe_history_ascending"


def state_to_dict(state: GameState) -> dict:
    return {
        "players": list(state.players),
        "scores": list(state.scores),
        "phase": state.phase.value,
        "history": [list(board) for board in state.history],
        "move_index": state.move_index,
    }


def state_from_dict(data) -> GameState:
    """Rebuild a GameState. Raises ValueError on any malformed payload."""
    if not isinstance(data, dict):
        raise ValueError("Stored game is not a mapping")
    try:
        return GameState.restore(
            players=data["players"],
            scores=data["scores"],
            phase=data["phase"],
            history=data["history"],
            move_index=data["move_index"],
        )
    except (KeyError, TypeError, IndexError) as e:
        raise ValueError(f"Stored game is incomplete: {e}") from e


def save_game(state: GameState):
    session[SESSION_KEY] = state_to_dict(state)


def load_game() -> GameState:
    """GameState for the current session, saved back on every change."""
    data = session.get(SESSION_KEY)
    state = GameState()
    if data is not None:
        try:
            state = state_from_dict(data)
        except ValueError as e:
            logger.warning("Discarding invalid game in session: %s", e)
            session.pop(SESSION_KEY, None)
    state.subscribe(save_game)
    return state


def history_ascending() -> bool:
    return session.get(ORDER_KEY, True)


def toggle_history_order() -> bool:
    """Flip the move-list display order. Game state is not involved."""
    ascending = not history_ascending()
    session[ORDER_KEY] = ascending
    return ascending
