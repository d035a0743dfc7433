"""Terminal front end: menus and the human-versus-human and human-versus-computer games."""

from __future__ import annotations

import os
import subprocess
import sys
from collections import deque

from puissance4.ai import best_move
from puissance4.board import PLAYER_ONE, PLAYER_TWO, Grid

DEFAULT_COLUMNS = 7
DEFAULT_ROWS = 6

_RESET = "\033[0m"
_BADGES = {
    PLAYER_ONE: "\033[1;104m J " + _RESET,
    PLAYER_TWO: "\033[1;101m O " + _RESET,
}


def clear_screen():
    """Clear the terminal."""
    if os.name == "nt":
        subprocess.run(["cmd", "/c", "cls"], check=False)
    else:
        print("\033[H\033[J", end="", flush=True)


def _say(text):
    print(text, end="", flush=True)


class _Console:
    """Reads whitespace-separated integers from standard input, line by line."""

    def __init__(self, stream=None):
        self._stream = stream if stream is not None else sys.stdin
        self._tokens = deque()

    def read_int(self):
        """Next integer, or None when the next word is not one. EOFError at end of input."""
        while not self._tokens:
            line = self._stream.readline()
            if not line:
                raise EOFError("no more input")
            self._tokens.extend(line.split())
        token = self._tokens.popleft()
        try:
            return int(token)
        except ValueError:
            return None

    def discard_line(self):
        """Drop what is left of the current input line."""
        self._tokens.clear()


def _next_other(player):
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


def _read_column(console, grid):
    """Ask until a column number between 1 and the grid width is given; return it 0-based."""
    while True:
        choice = console.read_int()
        if choice is not None and 1 <= choice <= grid.columns:
            return choice - 1
        clear_screen()
        _say(grid.render())
        _say(
            "\nVotre choix est invalide. Veuillez entrer un chiffre entre 1 et "
            f"{grid.columns} : "
        )
        console.discard_line()


def _human_move(console, grid, player):
    """Read columns until one has room, play it and return it."""
    while True:
        column = _read_column(console, grid)
        clear_screen()
        if grid.play(column, player):
            return column
        _say(grid.render())
        _say(
            "\nCette action ne peut pas etre effectuer, la colonne choisie est pleine\n"
            "veuillez choisir une autre colonne : "
        )
        console.discard_line()


def _play_vs_computer(columns, rows, console):
    grid = Grid(columns, rows)
    clear_screen()
    _say(grid.render())
    player = PLAYER_ONE
    while True:
        if player == PLAYER_ONE:
            _say(
                "\nC'est à vous de jouer, veuillez choisir une colonne entre 1 et "
                f"{grid.columns} : "
            )
            column = _human_move(console, grid, player)
            if grid.has_won(column, player):
                _say("\nFélicitation! vous avez battu l'ordinateur")
                break
            if grid.is_full():
                _say("\nPartie nulle, personne ne gange\n")
                break
        else:
            _say("\n\n")
            column = best_move(grid)
            grid.play(column, player)
            clear_screen()
            _say(grid.render())
            _say(f"L'ordinateur a joué dans la colonne {column + 1}\n")
            if grid.has_won(column, player):
                _say("\nMalheureusement, L'ordinateur vous a gagné\n\n")
                break
            if grid.is_full():
                _say("\nPartie nulle, personne n'a gangé\n")
                break
        player = _next_other(player)
    _say("\n")


def _play_vs_human(columns, rows, console):
    grid = Grid(columns, rows)
    clear_screen()
    _say(grid.render())
    player = PLAYER_ONE
    while True:
        _say("\nLe tour est au joueur" + _BADGES[player])
        _say(f"\nveuillez choisir une colonne entre 1 et {grid.columns} :")
        column = _human_move(console, grid, player)
        _say(grid.render())
        if grid.has_won(column, player):
            _say("\nFélicitation au joueur " + _BADGES[player] + " !, vous avez gagner la partie\n")
            break
        if grid.is_full():
            _say("\nPartie nulle, personne ne gange\n")
            break
        player = _next_other(player)
    _say("\n")


def play_vs_computer(columns, rows):
    """Play one game against the computer on a ``columns`` x ``rows`` grid."""
    _play_vs_computer(columns, rows, _Console())


def play_vs_human(columns, rows):
    """Play one game between two people on a ``columns`` x ``rows`` grid."""
    _play_vs_human(columns, rows, _Console())


def _read_choice(console, menu, low, high):
    """Show ``menu`` until a number in ``low..high`` is entered."""
    while True:
        _say(menu)
        choice = console.read_int()
        if choice is not None and low <= choice <= high:
            return choice
        clear_screen()
        _say("Votre choix est invalide\n")
        console.discard_line()


def _read_size(console, prompt):
    while True:
        _say(prompt)
        value = console.read_int()
        if value is not None and value >= 1:
            return value
        clear_screen()
        _say("Votre choix est invalide\n")
        console.discard_line()


_MAIN_MENU = (
    "\n\n1 - Jouer une partie classique 6x7\n"
    "2 - Définir les coordonnées de votre grille\n"
    "3 - Quitter\n\n"
    "Veuillez entrer votre choix :"
)

_OPPONENT_MENU = (
    "\n\n1- jouer une partie contre un ami\n"
    "2- jouer une partie contre l'ordinateur\n"
    "3 - Retour au menu\n\n"
    "Veuillez entrer votre choix :"
)


def _launch(console):
    _say("\n\nBienvenue au jeu lePuissance4")
    while True:
        choice = _read_choice(console, _MAIN_MENU, 1, 3)
        clear_screen()
        if choice == 3:
            return
        if choice == 1:
            columns, rows = DEFAULT_COLUMNS, DEFAULT_ROWS
        else:
            columns = _read_size(console, "\n\nVeuillez entrer le nombre de Colonnes: ")
            rows = _read_size(console, "\n\nVeuillez entrer le nombre de Lignes: ")
            clear_screen()
        opponent = _read_choice(console, _OPPONENT_MENU, 1, 3)
        clear_screen()
        if opponent == 1:
            _play_vs_human(columns, rows, console)
            return
        if opponent == 2:
            _play_vs_computer(columns, rows, console)
            return


def launch():
    """Show the main menu and run the game the user picks."""
    _launch(_Console())


def main(argv=None):
    """Entry point of the command; returns the exit status."""
    try:
        launch()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0