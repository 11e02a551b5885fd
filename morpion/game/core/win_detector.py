"""
Win/draw detection for a 3x3 tic-tac-toe board.
Boards are 9-cell sequences in row-major order; a cell is None, "X" or "O".
"""
from dataclasses import dataclass

X = "X"
O = "O"
MARKS = (X, O)
BOARD_SIZE = 9

# Rows, then columns, then diagonals. Scan order decides which line is
# reported when several are complete at once.
WINNING_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class Ongoing:
    """No three-in-a-row and at least one empty cell."""

    is_terminal = False
    winning_line = ()

    def includes(self, cell: int) -> bool:
        return False


@dataclass(frozen=True)
class Win:
    mark: str
    line: tuple[int, int, int]

    is_terminal = True

    @property
    def winning_line(self) -> tuple[int, int, int]:
        return self.line

    def includes(self, cell: int) -> bool:
        """True if the cell is part of the winning line (used for highlighting)."""
        return cell in self.line


@dataclass(frozen=True)
class Draw:
    """Board full, nobody won."""

    is_terminal = True
    winning_line = ()

    def includes(self, cell: int) -> bool:
        return False


Result = Ongoing | Win | Draw

ONGOING = Ongoing()
DRAW = Draw()


def empty_board() -> tuple:
    return (None,) * BOARD_SIZE


def evaluate(board) -> Result:
    """
    Evaluate a board snapshot.
    Returns Win(mark, line) for the first complete line in scan order,
    Draw if the board is full, otherwise Ongoing.
    """
    if len(board) != BOARD_SIZE:
        raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(board)}")

    for a, b, c in WINNING_LINES:
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Win(board[a], (a, b, c))

    if None in board:
        return ONGOING
    return DRAW
