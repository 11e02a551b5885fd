"""
Game state for a two-player match: board history with time-travel,
player names, cumulative scores and match phase.

Commands that would be illegal from the UI (occupied cell, move after the
round ended, jump outside the history) are silent no-ops returning False.
Observers registered with subscribe() are called after every change.
"""
import enum
import logging

from morpion.game.core.win_detector import (
    BOARD_SIZE,
    O,
    X,
    Win,
    empty_board,
    evaluate,
)

logger = logging.getLogger(__name__)


class MatchPhase(enum.Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"


class GameState:
    def __init__(self):
        self.players = ("", "")
        self.scores = (0, 0)
        self.phase = MatchPhase.NOT_STARTED
        self._history = [empty_board()]
        self.move_index = 0
        self._observers = []

    # --- Observers ---

    def subscribe(self, callback):
        """Register a callable invoked with this state after each change."""
        if callback not in self._observers:
            self._observers.append(callback)

    def _notify(self):
        for callback in list(self._observers):
            callback(self)

    # --- Queries ---

    @property
    def history(self) -> tuple:
        return tuple(self._history)

    @property
    def current_board(self) -> tuple:
        return self._history[self.move_index]

    @property
    def x_is_next(self) -> bool:
        return self.move_index % 2 == 0

    @property
    def next_mark(self) -> str:
        return X if self.x_is_next else O

    @property
    def current_player(self) -> str:
        """Name of the player whose turn it is (player 1 plays X)."""
        return self.players[0] if self.x_is_next else self.players[1]

    @property
    def result(self):
        return evaluate(self.current_board)

    # --- Commands ---

    def start_match(self, name1, name2) -> bool:
        """
        Start a match between two named players.
        Returns False (and changes nothing) if either name is blank.
        """
        name1 = (name1 or "").strip()
        name2 = (name2 or "").strip()
        if not name1 or not name2:
            logger.debug("Rejected match start with blank player name")
            return False

        self.players = (name1, name2)
        self.phase = MatchPhase.IN_PROGRESS
        self.scores = (0, 0)
        self._reset_round()
        logger.info("Match started: %s (X) vs %s (O)", name1, name2)
        self._notify()
        return True

    def apply_move(self, cell_index) -> bool:
        """Play the next mark at cell_index. Returns True if the move was applied."""
        if isinstance(cell_index, bool) or not isinstance(cell_index, int):
            logger.debug("Ignored move at non-integer cell %r", cell_index)
            return False
        if not 0 <= cell_index < BOARD_SIZE:
            logger.debug("Ignored move at out-of-range cell %s", cell_index)
            return False

        board = self.current_board
        if evaluate(board).is_terminal:
            logger.debug("Ignored move at cell %s: round is over", cell_index)
            return False
        if board[cell_index] is not None:
            logger.debug("Ignored move at occupied cell %s", cell_index)
            return False

        next_board = list(board)
        next_board[cell_index] = self.next_mark
        next_board = tuple(next_board)

        self._history = self._history[: self.move_index + 1] + [next_board]
        self.move_index = len(self._history) - 1

        outcome = evaluate(next_board)
        if isinstance(outcome, Win):
            self._award_point(outcome.mark)
        self._notify()
        return True

    def jump_to(self, index) -> bool:
        """Move the history pointer. History and scores are untouched."""
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if not 0 <= index < len(self._history):
            logger.debug("Ignored jump to move %s (history has %s boards)", index, len(self._history))
            return False
        self.move_index = index
        self._notify()
        return True

    def restart_round(self):
        """Clear the board for a new round, keeping players and scores."""
        self._reset_round()
        self._notify()

    def quit_match(self):
        """Back to the name-entry screen; scores are reset."""
        self.phase = MatchPhase.NOT_STARTED
        self.scores = (0, 0)
        logger.info("Match quit")
        self._notify()

    # --- Internals ---

    def _reset_round(self):
        self._history = [empty_board()]
        self.move_index = 0

    def _award_point(self, mark):
        x_score, o_score = self.scores
        if mark == X:
            x_score += 1
        else:
            o_score += 1
        self.scores = (x_score, o_score)
        winner = self.players[0] if mark == X else self.players[1]
        logger.info("Round won by %s (%s); score %s-%s", winner, mark, x_score, o_score)

    @classmethod
    def restore(cls, players, scores, phase, history, move_index):
        """
        Rebuild a state from stored values.
        Raises ValueError if the history breaks the move-parity rules.
        """
        history = [tuple(board) for board in history]
        if not history or history[0] != empty_board():
            raise ValueError("History must start with an empty board")
        for i in range(1, len(history)):
            _check_step(history[i - 1], history[i], i - 1)
            if evaluate(history[i - 1]).is_terminal:
                raise ValueError(f"Board {i} follows a finished round")
        if isinstance(move_index, bool) or not isinstance(move_index, int):
            raise ValueError(f"Move index must be an integer, got {move_index!r}")
        if not 0 <= move_index < len(history):
            raise ValueError(f"Move index {move_index} outside history of {len(history)}")
        if not isinstance(players, (list, tuple)) or not isinstance(scores, (list, tuple)):
            raise ValueError("Players and scores must be sequences")
        if len(players) != 2 or len(scores) != 2:
            raise ValueError("Expected exactly two players and two scores")
        if any(not isinstance(name, str) for name in players):
            raise ValueError("Player names must be strings")
        if any(isinstance(s, bool) or not isinstance(s, int) or s < 0 for s in scores):
            raise ValueError("Scores must be non-negative integers")

        state = cls()
        state.players = (players[0], players[1])
        state.scores = (scores[0], scores[1])
        state.phase = MatchPhase(phase)
        state._history = history
        state.move_index = move_index
        return state


def _check_step(previous, board, previous_index):
    if len(board) != BOARD_SIZE:
        raise ValueError(f"Board must have {BOARD_SIZE} cells")
    changed = [i for i in range(BOARD_SIZE) if previous[i] != board[i]]
    if len(changed) != 1 or previous[changed[0]] is not None:
        raise ValueError(f"Board {previous_index + 1} must add exactly one mark")
    expected = X if previous_index % 2 == 0 else O
    if board[changed[0]] != expected:
        raise ValueError(f"Board {previous_index + 1} should add {expected}")
