"""Computer opponent: a game tree searched with minimax over a static evaluation."""

from __future__ import annotations

from collections.abc import Iterator

from puissance4.board import EMPTY, PLAYER_ONE, PLAYER_TWO, Grid

MAX_DEPTH = 5
WINDOW = 4

# Rewards for a window of four places, by (tokens, empty places).
_SCORES = {
    PLAYER_TWO: {(4, 0): 100, (3, 1): 5, (2, 2): 2},
    PLAYER_ONE: {(4, 0): -95, (3, 1): -4, (2, 2): -1},
}


class Node:
    """A position of the game tree, holding its own copy of the grid."""

    def __init__(self, grid):
        self.grid = grid.copy()
        self.children = [None] * grid.columns
        self.parent = None
        self.child_count = 0
        self.score = 0

    def __repr__(self):
        return f"Node(score={self.score}, child_count={self.child_count})"

    @property
    def is_leaf(self):
        return self.child_count == 0

    def add_child(self, child, index):
        """Attach ``child`` as the position reached by playing column ``index``."""
        if self.child_count >= self.grid.columns:
            raise ValueError("this node cannot take another child")
        self.children[index] = child
        self.child_count += 1
        child.parent = self

    def iter_children(self) -> Iterator[tuple[int, Node]]:
        """Yield (column, child) for every attached child, left to right."""
        for index, child in enumerate(self.children):
            if child is not None:
                yield index, child


def build_tree(root, max_depth=MAX_DEPTH):
    """Expand ``root`` with every move up to ``max_depth`` plies.

    The computer (player two) moves first from the root, players alternate
    after that, and a position where the last move won is not expanded.
    """

    def expand(node, depth):
        if depth == max_depth:
            return
        player = PLAYER_TWO if depth % 2 == 0 else PLAYER_ONE
        for column in range(node.grid.columns):
            if not node.grid.can_play(column) or node.children[column] is not None:
                continue
            child = Node(node.grid)
            child.grid.play(column, player)
            node.add_child(child, column)
            if not child.grid.has_won(column, player):
                expand(child, depth + 1)

    expand(root, 0)


def fill_leaf_scores(node):
    """Give every leaf below (and including) ``node`` its static evaluation."""
    if node is None:
        return
    if node.is_leaf:
        node.score = evaluate(node.grid)
        return
    for _, child in node.iter_children():
        fill_leaf_scores(child)


def minimax(node, ai_turn):
    """Back up leaf scores through the tree and return the score of ``node``."""
    if node.is_leaf:
        return node.score
    scores = [minimax(child, not ai_turn) for _, child in node.iter_children()]
    node.score = max(scores) if ai_turn else min(scores)
    return node.score


def line_score(count, empties, player):
    """Reward of a window holding ``count`` of ``player``'s tokens and ``empties`` gaps."""
    return _SCORES.get(player, {}).get((count, empties), 0)


def _window_score(window, player):
    count = empties = 0
    for value in window:
        if value == player:
            count += 1
        elif value == EMPTY:
            empties += 1
        else:
            break
    return line_score(count, empties, player)


def _horizontal_windows(grid):
    for row in range(grid.rows):
        for start in range(grid.columns - WINDOW + 1):
            yield tuple(grid.cells[start + k][row] for k in range(WINDOW))


def _vertical_windows(grid):
    for column in grid.cells:
        for start in range(grid.rows - WINDOW + 1):
            yield tuple(column[start : start + WINDOW])


def _diagonal_windows(grid):
    for row in range(grid.rows - WINDOW + 1):
        for start in range(grid.columns - WINDOW + 1):
            yield tuple(grid.cells[start + k][row + k] for k in range(WINDOW))
    for row in range(WINDOW - 1, grid.rows):
        for start in range(grid.columns - WINDOW + 1):
            yield tuple(grid.cells[start + k][row - k] for k in range(WINDOW))


def evaluate_horizontal(grid, player):
    """Sum of window rewards for ``player`` along the rows."""
    return sum(_window_score(window, player) for window in _horizontal_windows(grid))


def evaluate_vertical(grid, player):
    """Sum of window rewards for ``player`` along the columns."""
    return sum(_window_score(window, player) for window in _vertical_windows(grid))


def evaluate_diagonal(grid, player):
    """Sum of window rewards for ``player`` along both diagonal directions."""
    return sum(_window_score(window, player) for window in _diagonal_windows(grid))


def evaluate(grid):
    """Static value of a position: positive favours the computer (player two)."""
    return sum(
        evaluation(grid, player)
        for player in (PLAYER_ONE, PLAYER_TWO)
        for evaluation in (evaluate_horizontal, evaluate_vertical, evaluate_diagonal)
    )


def choose_move(root):
    """Column of the root's best-scored child; the rightmost one on ties."""
    best_column = None
    best_score = None
    for column, child in root.iter_children():
        if best_score is None or child.score >= best_score:
            best_column, best_score = column, child.score
    if best_column is None:
        raise ValueError("no move available from this position")
    return best_column


def best_move(grid: Grid, max_depth=MAX_DEPTH):
    """Column the computer plays in ``grid``, searching ``max_depth`` plies."""
    root = Node(grid)
    build_tree(root, max_depth)
    fill_leaf_scores(root)
    minimax(root, True)
    return choose_move(root)