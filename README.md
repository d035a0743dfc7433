# puissance4

Connect Four ("Puissance 4") in the terminal. You can play against a friend
on the same keyboard or against the computer. The computer searches five
moves ahead with minimax. The game's prompts are in French.

## Installation

```
pip install .
```

## Playing

```
puissance4
```

The main menu offers three choices:

1. a classic game on a grid 7 columns wide and 6 rows high;
2. a game on a grid of the size you enter (both numbers must be at least 1);
3. quit.

Next, choose to play against a friend or against the computer. You can also
go back to the main menu from there. On your turn, type a column number from
1 to the grid's width. If the number is out of range or the column is full,
the game asks again.

The first player to line up four discs wins. A line can run across, up and
down, or along either diagonal. If the grid fills up with no line of four,
the game is a draw.

Player one's discs show as `J` on blue and player two's as `O` on red. The
computer always plays second. When the input ends or you press Ctrl-C, the
command exits quietly.

## Using the library

You can use the board and the computer player from Python without the
terminal interface:

```python
from puissance4.board import Grid
from puissance4.ai import best_move

grid = Grid(7, 6)
grid.play(3, 1)            # player 1 drops a disc in the fourth column
column = best_move(grid, 5)
grid.play(column, 2)
print(grid.render())
```

The board:

- `Grid(columns, rows)` raises `ValueError` if either size is below 1.
- Columns are numbered from 0.
- `Grid.play(column, player)` returns `False` when the column is full. It raises `IndexError` for a column outside the grid.
- `Grid.has_won(column, player)` checks whether the top disc of that column completes a line of four.
- `Grid.is_full()` tells you when the grid has no room left.

The `puissance4.ai` module exposes the search step by step:

- `Node` holds a position of the game tree.
- `build_tree(root, max_depth)` expands it.
- `fill_leaf_scores` and `evaluate` score the leaves. A positive score favours player two.
- `minimax` backs the scores up the tree.
- `choose_move` picks the best child. On a tie it picks the rightmost.

`best_move(grid, max_depth)` runs all of these steps in one call.

The terminal games can also be started directly:

- `puissance4.game.play_vs_human(columns, rows)` starts a game between two people.
- `puissance4.game.play_vs_computer(columns, rows)` starts a game against the computer.
- `puissance4.game.launch()` shows the main menu.

## Tests

```
pip install ".[test]"
pytest
```