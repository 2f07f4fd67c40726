"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import argparse
import curses
from enum import Enum
from typing import Callable

from termgames.random_utils import randint


class Choice(Enum):
    """A hand shape, or NONE before the first move."""

    ROCK = "ROCK"
    PAPER = "PAPER"
    SCISSORS = "SCISSORS"
    NONE = "NONE"

    def __str__(self) -> str:
        return self.value


class Status(Enum):
    """Outcome of one round from the player's point of view."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


_BEATS = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}

_KEYS = {"r": Choice.ROCK, "p": Choice.PAPER, "s": Choice.SCISSORS}

_COMPUTER_CHOICES = (Choice.ROCK, Choice.PAPER, Choice.SCISSORS)

_START_MESSAGE = "Make your move (R)ock, (P)aper, (S)cissors or (Q)uit."
_INVALID_MESSAGE = "Invalid input. Press (R)ock, (P)aper, (S)cissors or (Q)uit."
_RESULT_MESSAGES = {
    Status.WIN: "YOU WIN! :)",
    Status.LOSE: "YOU LOSE! :(",
    Status.DRAW: "It's a DRAW! :|",
}


def determine_winner(player_choice: Choice, computer_choice: Choice) -> Status:
    """Decide the round: rock beats scissors, paper beats rock, scissors beat paper."""
    if player_choice == computer_choice:
        return Status.DRAW
    if _BEATS.get(player_choice) == computer_choice:
        return Status.WIN
    return Status.LOSE


def choice_from_key(key: str) -> Choice | None:
    """Map a key (r, p or s in either case) to a move; None for any other key."""
    return _KEYS.get(key.lower())


def _random_choice() -> Choice:
    return _COMPUTER_CHOICES[randint(0, 2)]


class RpsGame:
    """Score and last moves of a rock-paper-scissors session."""

    def __init__(self, pick: Callable[[], Choice] | None = None) -> None:
        self._pick = pick or _random_choice
        self.player_choice = Choice.NONE
        self.computer_choice = Choice.NONE
        self.result_message = _START_MESSAGE
        self.player_wins = 0
        self.computer_wins = 0
        self.draws = 0

    def press(self, key: str) -> bool:
        """Handle a key press; return False when the player quits."""
        key = key.lower()
        if key == "q":
            return False
        choice = choice_from_key(key)
        if choice is None:
            self.result_message = _INVALID_MESSAGE
            return True

        self.player_choice = choice
        self.computer_choice = self._pick()
        outcome = determine_winner(self.player_choice, self.computer_choice)
        self.result_message = _RESULT_MESSAGES[outcome]
        if outcome is Status.WIN:
            self.player_wins += 1
        elif outcome is Status.LOSE:
            self.computer_wins += 1
        else:
            self.draws += 1
        return True

    def screen_lines(self) -> list[tuple[int, str]]:
        """Return the screen contents as (row, text) pairs."""
        return [
            (0, "--- ROCK PAPER SCISSORS ---"),
            (
                2,
                f"Player Wins: {self.player_wins} | Computer Wins: "
                f"{self.computer_wins} | Draws: {self.draws}",
            ),
            (4, f"Your last choice: {self.player_choice}"),
            (5, f"Computer last choice: {self.computer_choice}"),
            (7, self.result_message),
            (9, "Press (R)ock, (P)aper, (S)cissors to play. Press Q to quit."),
        ]

    def summary(self) -> str:
        """Return the final score report."""
        return "\n".join(
            [
                "\n--- GAME OVER ---",
                "Final Score:",
                f"Player Wins: {self.player_wins}",
                f"Computer Wins: {self.computer_wins}",
                f"Draws: {self.draws}",
                "Thanks for playing!",
            ]
        )


def _draw(stdscr, lines: list[tuple[int, str]]) -> None:
    stdscr.erase()
    for row, text in lines:
        try:
            stdscr.addstr(row, 0, text)
        except curses.error:
            pass
    stdscr.refresh()


def run(stdscr, game: RpsGame) -> RpsGame:
    """Drive the game on a curses window until the player quits."""
    stdscr.keypad(True)
    while True:
        _draw(stdscr, game.screen_lines())
        ch = stdscr.getch()
        if ch == -1:
            continue
        key = chr(ch) if 0 <= ch < 256 else ""
        if not game.press(key):
            break
    return game


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal and print the final score."""
    parser = argparse.ArgumentParser(
        prog="rock-paper-scissors",
        description="Play rock, paper, scissors against the computer.",
    )
    parser.parse_args(argv)
    game = RpsGame()
    curses.wrapper(run, game)
    print(game.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())