import pytest

from termgames.rps import (
    Choice,
    RpsGame,
    Status,
    choice_from_key,
    determine_winner,
    run,
)


def scripted(*choices):
    picks = iter(choices)
    return lambda: next(picks)


class FakeScreen:
    def __init__(self, keys):
        self._keys = list(keys)
        self.writes = []

    def keypad(self, flag):
        pass

    def erase(self):
        pass

    def refresh(self):
        pass

    def addstr(self, row, col, text):
        self.writes.append((row, col, text))

    def getch(self):
        return self._keys.pop(0)


@pytest.mark.parametrize(
    "player, computer, expected",
    [
        (Choice.ROCK, Choice.SCISSORS, Status.WIN),
        (Choice.PAPER, Choice.ROCK, Status.WIN),
        (Choice.SCISSORS, Choice.PAPER, Status.WIN),
        (Choice.ROCK, Choice.PAPER, Status.LOSE),
        (Choice.PAPER, Choice.SCISSORS, Status.LOSE),
        (Choice.SCISSORS, Choice.ROCK, Status.LOSE),
        (Choice.ROCK, Choice.ROCK, Status.DRAW),
        (Choice.NONE, Choice.NONE, Status.DRAW),
        (Choice.NONE, Choice.ROCK, Status.LOSE),
    ],
)
def test_determine_winner(player, computer, expected):
    assert determine_winner(player, computer) is expected


def test_winner_is_antisymmetric():
    moves = [Choice.ROCK, Choice.PAPER, Choice.SCISSORS]
    for a in moves:
        for b in moves:
            if a is not b:
                assert {determine_winner(a, b), determine_winner(b, a)} == {
                    Status.WIN,
                    Status.LOSE,
                }


@pytest.mark.parametrize(
    "key, expected",
    [
        ("r", Choice.ROCK),
        ("R", Choice.ROCK),
        ("p", Choice.PAPER),
        ("S", Choice.SCISSORS),
        ("x", None),
        ("q", None),
    ],
)
def test_choice_from_key(key, expected):
    assert choice_from_key(key) is expected


@pytest.mark.parametrize(
    "key, computer, player_label, computer_label",
    [
        ("r", Choice.SCISSORS, "ROCK", "SCISSORS"),
        ("p", Choice.ROCK, "PAPER", "ROCK"),
        ("s", Choice.PAPER, "SCISSORS", "PAPER"),
    ],
)
def test_choice_labels_on_screen(key, computer, player_label, computer_label):
    game = RpsGame(scripted(computer))
    game.press(key)
    lines = dict(game.screen_lines())
    assert lines[4] == f"Your last choice: {player_label}"
    assert lines[5] == f"Computer last choice: {computer_label}"


def test_initial_state():
    game = RpsGame()
    lines = dict(game.screen_lines())
    assert lines[4] == "Your last choice: NONE"
    assert lines[5] == "Computer last choice: NONE"
    assert lines[7] == "Make your move (R)ock, (P)aper, (S)cissors or (Q)uit."


def test_press_win_lose_draw():
    game = RpsGame(scripted(Choice.SCISSORS, Choice.PAPER, Choice.PAPER))
    assert game.press("r") is True
    assert game.result_message == "YOU WIN! :)"
    game.press("R")
    assert game.result_message == "YOU LOSE! :("
    game.press("p")
    assert game.result_message == "It's a DRAW! :|"
    assert (game.player_wins, game.computer_wins, game.draws) == (1, 1, 1)
    assert game.player_choice is Choice.PAPER
    assert game.computer_choice is Choice.PAPER


def test_invalid_key_keeps_score():
    game = RpsGame(scripted())
    assert game.press("x") is True
    assert game.result_message == (
        "Invalid input. Press (R)ock, (P)aper, (S)cissors or (Q)uit."
    )
    assert (game.player_wins, game.computer_wins, game.draws) == (0, 0, 0)


@pytest.mark.parametrize("key", ["q", "Q"])
def test_quit_key(key):
    assert RpsGame().press(key) is False


def test_random_computer_choice_is_a_move():
    game = RpsGame()
    for _ in range(30):
        game.press("s")
        assert game.computer_choice in (Choice.ROCK, Choice.PAPER, Choice.SCISSORS)


def test_summary_contains_score():
    game = RpsGame(scripted(Choice.ROCK))
    game.press("p")
    text = game.summary()
    assert text.startswith("\n--- GAME OVER ---")
    assert f"Player Wins: {game.player_wins}" in text
    assert text.endswith("Thanks for playing!")


def test_run_until_quit():
    game = RpsGame(scripted(Choice.PAPER))
    screen = FakeScreen([ord("s"), -1, 1000, ord("q")])
    result = run(screen, game)
    assert result is game
    assert game.player_wins == 1
    assert game.result_message.startswith("Invalid input.")
    texts = [text for _, _, text in screen.writes]
    assert "--- ROCK PAPER SCISSORS ---" in texts
    assert "YOU WIN! :)" in texts