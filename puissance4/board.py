"""The game grid: dropping tokens into columns and detecting wins."""

from __future__ import annotations

EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2

_RESET = "\033[0m"
_TOKENS = {
    PLAYER_ONE: "\033[1;104m J " + _RESET,
    PLAYER_TWO: "\033[1;101m O " + _RESET,
}


class Grid:
    """A grid of columns filled from the bottom up.

    ``cells[column][row]`` holds the player code at that place, row 0 being
    the bottom; ``heights[column]`` is the number of tokens in a column and
    ``filled`` the number of tokens in the whole grid.
    """

    def __init__(self, columns, rows):
        if columns < 1 or rows < 1:
            raise ValueError(f"a grid needs at least one column and one row, got {columns}x{rows}")
        self.columns = columns
        self.rows = rows
        self.cells = [[EMPTY] * rows for _ in range(columns)]
        self.heights = [0] * columns
        self.filled = 0

    def __repr__(self):
        return f"Grid(columns={self.columns}, rows={self.rows}, filled={self.filled})"

    def copy(self):
        """Return an independent copy of the grid."""
        duplicate = Grid(self.columns, self.rows)
        duplicate.cells = [list(column) for column in self.cells]
        duplicate.heights = list(self.heights)
        duplicate.filled = self.filled
        return duplicate

    def is_full(self):
        """True when every place of the grid holds a token."""
        return self.filled == self.columns * self.rows

    def _check_column(self, column):
        if not 0 <= column < self.columns:
            raise IndexError(f"column {column} is outside 0..{self.columns - 1}")

    def can_play(self, column):
        """True when the column still has room for a token."""
        self._check_column(column)
        return self.heights[column] != self.rows

    def play(self, column, player):
        """Drop a token for ``player`` into ``column``; False if the column is full."""
        if not self.can_play(column):
            return False
        self.cells[column][self.heights[column]] = player
        self.heights[column] += 1
        self.filled += 1
        return True

    def has_won(self, column, player):
        """True when the top token of ``column`` completes four in a row for ``player``."""
        return (
            self.check_diagonal_down(column, player)
            or self.check_diagonal_up(column, player)
            or self.check_horizontal(column, player)
            or self.check_vertical(column, player)
        )

    def _run(self, column, row, step_column, step_row, player):
        """Count consecutive ``player`` tokens from a place along a direction."""
        count = 0
        while 0 <= column < self.columns and 0 <= row < self.rows and self.cells[column][row] == player:
            count += 1
            column += step_column
            row += step_row
        return count

    def _top(self, column):
        self._check_column(column)
        return self.heights[column]

    def check_vertical(self, column, player):
        """Three matching tokens below the top one of ``column``."""
        height = self._top(column)
        if height == 0:
            return False
        return self._run(column, height - 2, 0, -1, player) >= 3

    def check_horizontal(self, column, player):
        """Three matching tokens beside the top one of ``column``, on its row."""
        height = self._top(column)
        if height == 0:
            return False
        row = height - 1
        return self._run(column - 1, row, -1, 0, player) + self._run(column + 1, row, 1, 0, player) >= 3

    def check_diagonal_up(self, column, player):
        """Three matching tokens on the rising diagonal through the top of ``column``."""
        height = self._top(column)
        if height == 0:
            return False
        below = self._run(column - 1, height - 2, -1, -1, player)
        above = self._run(column + 1, height, 1, 1, player)
        return below + above >= 3

    def check_diagonal_down(self, column, player):
        """Three matching tokens on the falling diagonal through the top of ``column``."""
        height = self._top(column)
        if height == 0:
            return False
        below = self._run(column + 1, height - 2, 1, -1, player)
        above = self._run(column - 1, height, -1, 1, player)
        return below + above >= 3

    def render(self):
        """The grid as coloured terminal text, top row first."""
        parts = ["\n\n "]
        parts.extend(f" {number}  " for number in range(1, self.columns + 1))
        parts.append("\n\n")
        for row in reversed(range(self.rows)):
            parts.append("|")
            for column in self.cells:
                parts.append(_TOKENS.get(column[row], "   "))
                parts.append("|")
            parts.append("\n\n")
        parts.append(_RESET)
        return "".join(parts)