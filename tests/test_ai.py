import pytest

from puissance4.ai import (
    Node,
    best_move,
    build_tree,
    choose_move,
    evaluate,
    evaluate_diagonal,
    evaluate_horizontal,
    evaluate_vertical,
    fill_leaf_scores,
    line_score,
    minimax,
)
from puissance4.board import Grid


def _count_nodes(node):
    return 1 + sum(_count_nodes(child) for _, child in node.iter_children())


def _leaf_depths(node, depth=0):
    if node.is_leaf:
        yield depth
        return
    for _, child in node.iter_children():
        yield from _leaf_depths(child, depth + 1)


@pytest.mark.parametrize(
    "count, empties, player, expected",
    [
        (4, 0, 2, 100),
        (3, 1, 2, 5),
        (2, 2, 2, 2),
        (4, 0, 1, -95),
        (3, 1, 1, -4),
        (2, 2, 1, -1),
        (1, 3, 2, 0),
        (1, 3, 1, 0),
        (3, 0, 2, 0),
        (4, 0, 3, 0),
    ],
)
def test_line_score(count, empties, player, expected):
    assert line_score(count, empties, player) == expected


def test_empty_grid_evaluates_to_zero():
    assert evaluate(Grid(7, 6)) == 0


def test_vertical_four_for_computer():
    grid = Grid(1, 4)
    for _ in range(4):
        grid.play(0, 2)
    assert evaluate_vertical(grid, 2) == 100
    assert evaluate(grid) == 100


def test_vertical_three_for_computer():
    grid = Grid(1, 4)
    for _ in range(3):
        grid.play(0, 2)
    assert evaluate(grid) == 5


def test_horizontal_four_for_human():
    grid = Grid(4, 1)
    for column in range(4):
        grid.play(column, 1)
    assert evaluate_horizontal(grid, 1) == -95
    assert evaluate_horizontal(grid, 2) == 0


def test_opponent_token_spoils_window():
    grid = Grid(4, 1)
    for column in range(3):
        grid.play(column, 2)
    grid.play(3, 1)
    assert evaluate_horizontal(grid, 2) == 0
    assert evaluate_horizontal(grid, 1) == 0


def test_small_grid_has_no_windows():
    grid = Grid(3, 3)
    for column in range(3):
        grid.play(column, 2)
    assert evaluate(grid) == 0


def test_diagonals():
    grid = Grid(4, 4)
    grid.play(0, 2)
    grid.play(1, 1)
    grid.play(1, 2)
    grid.play(2, 1)
    grid.play(2, 1)
    grid.play(2, 2)
    for _ in range(3):
        grid.play(3, 1)
    grid.play(3, 2)
    assert evaluate_diagonal(grid, 2) == 100
    assert evaluate_diagonal(grid, 1) == -1


def test_node_copies_grid():
    grid = Grid(3, 3)
    node = Node(grid)
    node.grid.play(0, 1)
    assert grid.filled == 0
    assert node.is_leaf


def test_add_child_links_parent():
    root = Node(Grid(2, 2))
    child = Node(Grid(2, 2))
    root.add_child(child, 1)
    assert root.children[1] is child
    assert child.parent is root
    assert root.child_count == 1


def test_add_child_refuses_too_many():
    root = Node(Grid(1, 1))
    root.add_child(Node(Grid(1, 1)), 0)
    with pytest.raises(ValueError):
        root.add_child(Node(Grid(1, 1)), 0)


def test_build_tree_depth_zero():
    root = Node(Grid(7, 6))
    build_tree(root, 0)
    assert root.is_leaf


def test_build_tree_depth_one():
    root = Node(Grid(7, 6))
    build_tree(root, 1)
    assert root.child_count == 7
    for column, child in root.iter_children():
        assert child.is_leaf
        assert child.grid.cells[column][0] == 2
        assert child.grid.filled == 1


def test_build_tree_alternates_players():
    root = Node(Grid(7, 6))
    build_tree(root, 2)
    for column, child in root.iter_children():
        assert child.child_count == 7
        for other, grandchild in child.iter_children():
            height = grandchild.grid.heights[other]
            assert grandchild.grid.cells[other][height - 1] == 1
            assert grandchild.grid.filled == 2
    assert set(_leaf_depths(root)) == {2}


def test_build_tree_skips_full_columns():
    grid = Grid(3, 2)
    grid.play(1, 1)
    grid.play(1, 2)
    root = Node(grid)
    build_tree(root, 1)
    assert root.children[1] is None
    assert root.child_count == 2


def test_build_tree_stops_after_win():
    grid = Grid(7, 6)
    for _ in range(3):
        grid.play(0, 2)
    root = Node(grid)
    build_tree(root, 2)
    assert root.children[0].is_leaf
    assert all(child.child_count == 7 for column, child in root.iter_children() if column != 0)


def test_fill_leaf_scores_matches_evaluation():
    root = Node(Grid(5, 4))
    build_tree(root, 2)
    fill_leaf_scores(root)
    for _, child in root.iter_children():
        for _, leaf in child.iter_children():
            assert leaf.score == evaluate(leaf.grid)
    assert root.score == 0


def test_minimax_on_handmade_tree():
    root = Node(Grid(3, 2))
    scores = [3, -2, 7]
    for index, score in enumerate(scores):
        child = Node(Grid(3, 2))
        child.score = score
        root.add_child(child, index)
    assert minimax(root, True) == 7
    assert root.score == 7
    assert minimax(root, False) == -2
    assert root.score == -2


def test_minimax_root_value_is_a_child_value():
    root = Node(Grid(5, 4))
    build_tree(root, 3)
    fill_leaf_scores(root)
    value = minimax(root, True)
    assert value == max(child.score for _, child in root.iter_children())
    for _, child in root.iter_children():
        if not child.is_leaf:
            assert child.score == min(grand.score for _, grand in child.iter_children())


def test_choose_move_prefers_rightmost_on_tie():
    root = Node(Grid(3, 2))
    for index, score in [(0, 5), (1, -1), (2, 5)]:
        child = Node(Grid(3, 2))
        child.score = score
        root.add_child(child, index)
    assert choose_move(root) == 2


def test_choose_move_without_children():
    with pytest.raises(ValueError):
        choose_move(Node(Grid(3, 2)))


def test_best_move_takes_the_win():
    grid = Grid(7, 6)
    for _ in range(3):
        grid.play(3, 2)
    grid.play(0, 1)
    grid.play(1, 1)
    grid.play(6, 1)
    assert best_move(grid, 3) == 3
    assert grid.filled == 6


def test_best_move_blocks_the_threat():
    grid = Grid(7, 6)
    for _ in range(3):
        grid.play(0, 1)
    grid.play(5, 2)
    grid.play(6, 2)
    assert best_move(grid, 2) == 0


def test_best_move_on_a_single_open_column():
    grid = Grid(2, 1)
    grid.play(0, 1)
    assert best_move(grid, 3) == 1