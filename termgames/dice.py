"""Dice game: roll against a computer rival, round after round."""

from __future__ import annotations

import argparse
import curses
from enum import Enum
from typing import Callable

from termgames.random_utils import randint

_QUIT_KEYS = (ord("q"), ord("Q"))

_INTRO = (
    (2, "In this game you and a computer Rival will play 10 rounds"),
    (3, "where you will each roll a 6-sided dice, and the player"),
    (4, "with the highest dice value will win the round. The player"),
    (5, "who wins the most rounds wins the game. Good luck! (Q/q to exit.)"),
)


class Status(Enum):
    """Outcome of one round from the player's point of view."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


def determine_winner(player_dice: int, rival_dice: int) -> Status:
    """Compare two dice values; the higher one wins."""
    if player_dice == rival_dice:
        return Status.DRAW
    if player_dice > rival_dice:
        return Status.WIN
    return Status.LOSE


def _roll_die() -> int:
    return randint(1, 6)


class DiceGame:
    """State of a dice game between the player and a rival."""

    def __init__(self, roll: Callable[[], int] | None = None) -> None:
        self._roll = roll or _roll_die
        self.round = 0
        self.player_dice = 0
        self.rival_dice = self._roll()
        self.result_message = f"Rival rolled a {self.rival_dice}"
        self.player_wins = 0
        self.rival_wins = 0
        self.draws = 0
        self.waiting = False

    def press(self) -> Status | None:
        """Handle a key press: roll the player's die, or start the next round.

        Returns the round's outcome when the player rolled, otherwise None.
        """
        if self.waiting:
            self.rival_dice = self._roll()
            self.result_message = f"Rival rolled a {self.rival_dice}"
            self.round += 1
            self.waiting = False
            return None

        self.player_dice = self._roll()
        outcome = determine_winner(self.player_dice, self.rival_dice)
        message = f"You rolled a {self.player_dice}"
        if outcome is Status.WIN:
            message += ". You won this round."
            self.player_wins += 1
        elif outcome is Status.DRAW:
            message += ". Draw."
            self.draws += 1
        else:
            message += ". Rival won this round."
            self.rival_wins += 1
        self.result_message = message
        self.waiting = True
        return outcome

    def screen_lines(self) -> list[tuple[int, str]]:
        """Return the screen contents as (row, text) pairs."""
        prompt = (
            "Press any key to continue."
            if self.waiting
            else "Press any key to roll the dice..."
        )
        return [
            (0, "--- Dice Game ---"),
            *_INTRO,
            (8, f"Round {self.round}"),
            (
                10,
                f"Player Wins: {self.player_wins} | Rival Wins: {self.rival_wins}"
                f" | Draws: {self.draws}",
            ),
            (12, f"Your last dice: {self.player_dice}"),
            (13, f"Rival's last dice: {self.rival_dice}"),
            (15, self.result_message),
            (17, prompt),
        ]

    def summary(self) -> str:
        """Return the final score report."""
        return "\n".join(
            [
                "\n--- GAME OVER ---",
                "Final Score:",
                f"Round: {self.round}",
                f"Player Wins: {self.player_wins}",
                f"Computer Wins: {self.rival_wins}",
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


def run(stdscr, game: DiceGame) -> DiceGame:
    """Drive the game on a curses window until the player quits."""
    stdscr.keypad(True)
    while True:
        _draw(stdscr, game.screen_lines())
        ch = stdscr.getch()
        if ch == -1:
            continue
        if ch in _QUIT_KEYS:
            break
        game.press()
    return game


def main(argv: list[str] | None = None) -> int:
    """Start the dice game in the terminal and print the final score."""
    parser = argparse.ArgumentParser(
        prog="dice-game", description="Roll dice against a computer rival."
    )
    parser.parse_args(argv)
    game = DiceGame()
    curses.wrapper(run, game)
    print(game.summary())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())