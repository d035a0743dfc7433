"""Connect Four in the terminal: a board, a minimax computer opponent and menus."""

__version__ = "1.0.0"