"""
Presentation strings derived from a GameState (French UI).
Status comes only from the current board's result and move parity.
"""
from typing import NamedTuple

from morpion.game.core.win_detector import Draw, Win

DRAW_MESSAGE = "Dommage personne a gagné !"
START_LABEL = "Aller au début de la partie"


class MoveEntry(NamedTuple):
    move: int
    label: str
    is_current: bool


def location(cell_index: int) -> str:
    """1-based (row, col) for a cell index, e.g. 5 -> "(2, 3)"."""
    row = cell_index // 3 + 1
    col = cell_index % 3 + 1
    return f"({row}, {col})"


def changed_cell(previous, board):
    """Index of the cell filled between two consecutive boards."""
    for i, (before, after) in enumerate(zip(previous, board)):
        if before != after:
            return i
    return None


def status_text(state) -> str:
    result = state.result
    if isinstance(result, Win):
        return f"{result.mark} a gagné"
    if isinstance(result, Draw):
        return DRAW_MESSAGE
    return f"Prochain tour : {state.next_mark}"


def score_line(state) -> str:
    (name1, name2), (score1, score2) = state.players, state.scores
    return f"Score : {name1} - {score1} | {name2} - {score2}"


def move_entries(state, ascending=True) -> list[MoveEntry]:
    """
    Move list for the history panel.
    The last board in the history is flagged current and rendered as text
    instead of a jump button.
    """
    history = state.history
    last = len(history) - 1
    entries = []
    for move, board in enumerate(history):
        if move == 0:
            label = START_LABEL
        else:
            cell = changed_cell(history[move - 1], board)
            label = f"Aller au coup #{move} {location(cell)}"
        entries.append(MoveEntry(move, label, move == last))
    if not ascending:
        entries.reverse()
    return entries


def current_move_label(move: int) -> str:
    return f"Vous êtes au coup #{move}"
