"""Guess-the-number game: find a secret number between 1 and 100."""

from __future__ import annotations

import argparse
import curses
import re

from termgames.random_utils import randint

MIN_NUMBER = 1
MAX_NUMBER = 100

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_INPUT_ROW = 10
_INPUT_COL = 38
_MESSAGE_ROW = 14


class GuessGame:
    """State of one round of guessing a secret number."""

    def __init__(self, secret: int | None = None) -> None:
        self.secret = randint(MIN_NUMBER, MAX_NUMBER) if secret is None else secret
        self.tries = 0
        self.won = False
        self.message = ""

    def submit(self, text: str) -> str:
        """Evaluate a typed guess and return the message to show."""
        if self.won:
            raise RuntimeError("the number has already been found")
        self.message = self._evaluate(text)
        return self.message

    def _evaluate(self, text: str) -> str:
        if not text.strip(" "):
            return "You entered an empty guess. Please enter a number."
        match = _LEADING_INT.match(text)
        if match is None:
            return "Invalid input! Please enter a valid number."
        guess = int(match.group(1))
        if not _INT_MIN <= guess <= _INT_MAX:
            return "Number out of range! Please enter a smaller/larger number."

        self.tries += 1
        if guess < MIN_NUMBER or guess > MAX_NUMBER:
            return f"Out of range ({MIN_NUMBER}-{MAX_NUMBER})! Try again."
        if guess < self.secret:
            return "HIGHER! Try again."
        if guess > self.secret:
            return "LOWER! Try again."
        self.won = True
        return f"Congratulations! You found the number in {self.tries} tries!"


def _put(stdscr, row: int, col: int, text: str) -> None:
    try:
        stdscr.addstr(row, col, text)
    except curses.error:
        pass


def read_guess(stdscr) -> str:
    """Read digits typed at the input field until Enter; backspace deletes."""
    _put(stdscr, _INPUT_ROW, _INPUT_COL, " " * 9)
    stdscr.move(_INPUT_ROW, _INPUT_COL)
    digits: list[str] = []
    while True:
        ch = stdscr.getch()
        if ch in (ord("\n"), curses.KEY_ENTER):
            break
        if ch in (curses.KEY_BACKSPACE, 127):
            if digits:
                digits.pop()
                _put(stdscr, _INPUT_ROW, _INPUT_COL + len(digits), " ")
                stdscr.move(_INPUT_ROW, _INPUT_COL + len(digits))
        elif ord("0") <= ch <= ord("9"):
            digits.append(chr(ch))
            _put(stdscr, _INPUT_ROW, _INPUT_COL + len(digits) - 1, chr(ch))
        stdscr.refresh()
    return "".join(digits)


def run(stdscr, game: GuessGame) -> GuessGame:
    """Drive the game on a curses window until the number is found."""
    try:
        curses.curs_set(1)
    except curses.error:
        pass
    stdscr.keypad(True)
    stdscr.clear()
    _put(stdscr, 2, 2, "========== GUESS THE NUMBER GAME ==========")
    _put(
        stdscr,
        4,
        2,
        f"I'm thinking of a number between {MIN_NUMBER} and {MAX_NUMBER}.",
    )
    _put(stdscr, 5, 2, "Let's see how many tries it takes you!")
    _put(stdscr, 7, 2, f"Number of Tries: {game.tries}")
    _put(stdscr, 8, 2, "---------------------------------------------")
    _put(stdscr, _INPUT_ROW, 2, "Enter your guess (and press Enter): ")
    stdscr.refresh()

    while not game.won:
        _put(stdscr, 7, 19, str(game.tries))
        stdscr.refresh()
        message = game.submit(read_guess(stdscr))
        _put(stdscr, _MESSAGE_ROW, 2, message)
        stdscr.clrtoeol()
        stdscr.refresh()

    _put(stdscr, 16, 2, "Press any key to exit the game...")
    stdscr.refresh()
    stdscr.getch()
    return game


def main(argv: list[str] | None = None) -> int:
    """Start the guessing game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="guess-a-number",
        description=f"Guess a secret number between {MIN_NUMBER} and {MAX_NUMBER}.",
    )
    parser.parse_args(argv)
    curses.wrapper(run, GuessGame())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())