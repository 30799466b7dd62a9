import logging

import numpy as np

from automove import auto_move
from config import AUTOMATIC, CHAR_MARKS, EMPTY, MANUAL, MARK_CHARS, O, X
from errors import GameOverError, IllegalMoveError
from search import is_winning_move

logger = logging.getLogger(__name__)


class Grid:
    """
    The board cells of a height x width rhombic Hex board.
    Cells hold EMPTY, O or X. Dimensions are fixed at creation.
    """
    def __init__(self, height, width):
        self.height = height
        self.width = width
        self.cells = np.full((height, width), EMPTY, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows):
        """Builds a grid from text rows of '.', 'O' and 'X' characters."""
        grid = cls(len(rows), len(rows[0]))
        for r, row in enumerate(rows):
            grid.cells[r] = [CHAR_MARKS[ch] for ch in row]
        return grid

    def is_within_bounds(self, row, col):
        return 0 <= row < self.height and 0 <= col < self.width

    def is_empty(self, row, col):
        """Requires (row, col) to be within bounds."""
        return self.cells[row, col] == EMPTY

    def get(self, row, col):
        return int(self.cells[row, col])

    def place(self, row, col, mark):
        """Writes mark into the cell. Callers check bounds and emptiness first."""
        self.cells[row, col] = mark

    def rows(self):
        """Returns the board as a list of text rows."""
        return [''.join(MARK_CHARS[int(v)] for v in row) for row in self.cells]


class Player:
    """One side of the game: its mark, control mode and auto-move counter."""
    def __init__(self, mark, player_type=AUTOMATIC, move_counter=0):
        self.mark = mark
        self.is_manual = player_type == MANUAL
        self.move_counter = move_counter

    @property
    def name(self):
        return MARK_CHARS[self.mark]

    def next_auto_move(self, height, width):
        """Returns the next formula candidate and advances the counter."""
        move = auto_move(self.mark, self.move_counter, height, width)
        self.move_counter += 1
        return move


class HexGame:
    """
    A class to represent and manage a game of Hex on a height x width board.
    Player O moves first and wins by connecting the left and right edges.
    Player X wins by connecting the top and bottom edges.
    """
    def __init__(self, height, width, player_types=(AUTOMATIC, AUTOMATIC),
                 x_turn=False, move_counters=(0, 0), grid=None):
        self.grid = grid if grid is not None else Grid(height, width)
        self.players = [
            Player(O, player_types[0], move_counters[0]),
            Player(X, player_types[1], move_counters[1]),
        ]
        self.x_turn = x_turn
        self.winner = None

    @property
    def height(self):
        return self.grid.height

    @property
    def width(self):
        return self.grid.width

    @property
    def current_player(self):
        return self.players[1] if self.x_turn else self.players[0]

    @property
    def is_over(self):
        return self.winner is not None

    def is_move_valid(self, row, col):
        """Checks that (row, col) is on the board and still empty."""
        return self.grid.is_within_bounds(row, col) and self.grid.is_empty(row, col)

    def generate_auto_move(self):
        """
        Draws formula candidates for the current player until one is valid.
        Every draw advances the player's counter, accepted or not.
        """
        player = self.current_player
        while True:
            row, col = player.next_auto_move(self.height, self.width)
            if self.is_move_valid(row, col):
                return row, col
            logger.debug("Player %s auto candidate (%d, %d) rejected", player.name, row, col)

    def make_move(self, row, col):
        """
        Places the current player's stone, checks for a win and passes the turn.
        Returns the winner's mark, or None while the game goes on.
        """
        if self.is_over:
            raise GameOverError(context={"winner": MARK_CHARS[self.winner]})
        if not self.is_move_valid(row, col):
            raise IllegalMoveError(f"Illegal move ({row}, {col}) attempted.")

        player = self.current_player
        self.grid.place(row, col, player.mark)
        if is_winning_move(self.grid, row, col, player.mark):
            self.winner = player.mark
            logger.info("Player %s wins after (%d, %d)", player.name, row, col)
        else:
            self.x_turn = not self.x_turn
        return self.winner

    def render(self):
        """Returns the staggered text picture of the board."""
        lines = []
        for r, row in enumerate(self.grid.rows()):
            lines.append(" " * (self.height - 1 - r) + " ".join(row))
        return "\n".join(lines)
