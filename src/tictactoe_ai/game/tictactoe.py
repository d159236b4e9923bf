"""
Tic-tac-toe rules for a flat 9-cell board.

Board layout (row-major):

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8

Cells hold "" (empty), "X" or "O". Scores are always from X's perspective:
an X win at depth d scores 10 - d, an O win scores -(10 - d), a draw 0.
The depth discount makes the search prefer quick wins and slow losses.
"""

from typing import List, Optional, Sequence


EMPTY = ""
PLAYERS = ("X", "O")

# Accepted spellings of an empty cell (normalized to EMPTY)
EMPTY_ALIASES = (EMPTY, None, " ", ".", "_", "-")

BOARD_CELLS = 9
WIN_SCORE = 10

LINES = (
    # Rows
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    # Columns
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    # Diagonals
    (0, 4, 8), (2, 4, 6),
)


class InvalidBoardError(ValueError):
    """Board has the wrong size, a foreign symbol, or an unreachable position."""


class InvalidPlayerError(ValueError):
    """Player is not "X" or "O"."""


def opponent(player: str) -> str:
    """Return the other player."""
    return "O" if player == "X" else "X"


def winner(board: Sequence[str]) -> Optional[str]:
    """
    Return the owner of the first completed line, or None.

    Lines are scanned in LINES order (rows, columns, diagonals).
    """
    for a, b, c in LINES:
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return v
    return None


def evaluate_terminal(board: Sequence[str], depth: int) -> Optional[int]:
    """
    Score a finished position from X's perspective.

    Args:
        board: 9-cell board
        depth: Plies played since the search root

    Returns:
        10 - depth if X has a line, -(10 - depth) if O has a line,
        0 for a full board without a line, None if the game goes on
    """
    won_by = winner(board)
    if won_by is not None:
        return WIN_SCORE - depth if won_by == "X" else -(WIN_SCORE - depth)
    return None if EMPTY in board else 0


def is_terminal(board: Sequence[str]) -> bool:
    return evaluate_terminal(board, 0) is not None


def empty_cells(board: Sequence[str]) -> List[int]:
    """Indices of empty cells in board order."""
    return [i for i, cell in enumerate(board) if cell == EMPTY]


def validate_player(player) -> str:
    if player not in PLAYERS:
        raise InvalidPlayerError(f"Player must be 'X' or 'O', got {player!r}")
    return player


def validate_board(board) -> List[str]:
    """
    Check a board and return a normalized copy.

    Empty-cell aliases (None, " ", ".", "_", "-") become "".

    Raises:
        InvalidBoardError: wrong length, unknown symbol, or both players
            owning a completed line (impossible under alternating play)
    """
    try:
        cells = list(board)
    except TypeError:
        raise InvalidBoardError(f"Board must be a sequence of {BOARD_CELLS} cells, got {type(board).__name__}") from None

    if len(cells) != BOARD_CELLS:
        raise InvalidBoardError(f"Board must have {BOARD_CELLS} cells, got {len(cells)}")

    normalized = []
    for i, cell in enumerate(cells):
        if cell in PLAYERS:
            normalized.append(cell)
        elif cell in EMPTY_ALIASES:
            normalized.append(EMPTY)
        else:
            raise InvalidBoardError(f"Cell {i} holds unknown symbol {cell!r}")

    owners = {normalized[a] for a, b, c in LINES
              if normalized[a] != EMPTY and normalized[a] == normalized[b] == normalized[c]}
    if len(owners) > 1:
        raise InvalidBoardError("Both players have a completed line")

    return normalized


def parse_board(text: str) -> List[str]:
    """
    Parse a 9-character board string such as "XOXO....." or "xo_x_o___".

    Whitespace and "/" or "|" row separators are ignored.
    """
    chars = [ch for ch in text if not ch.isspace() and ch not in "/|"]
    return validate_board([ch.upper() if ch.upper() in PLAYERS else ch for ch in chars])


def format_board(board: Sequence[str]) -> str:
    """Render a board as three text rows, empty cells shown as their index."""
    rows = []
    for r in range(3):
        cells = [board[3 * r + c] or str(3 * r + c) for c in range(3)]
        rows.append(" " + " | ".join(cells))
    return "\n---+---+---\n".join(rows)
