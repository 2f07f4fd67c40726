# termgames

Three small games that you play in a terminal window.

## Installing

```
pip install .
```

The games draw their screens with Python's `curses` module. That module comes with Python on Linux and macOS.

## Playing

Each game is a command. You can also start a game with `python -m`, for example `python -m termgames.dice`.

### Dice game

```
dice-game
```

You and a computer rival each roll a six-sided die, and the higher roll wins the round. The rival rolls first. The screen always shows the round number, your last roll, the rival's last roll and the counts of wins and draws.

- Press any key to roll your die. The round's result is shown.
- Press any key again to start the next round. The rival rolls again.
- Press `q` or `Q` to quit.

The introduction on screen speaks of 10 rounds, but the game does not stop on its own. It keeps going until you quit. When you quit, the final score is printed.

### Guess the number

```
guess-a-number
```

The game picks a secret number from 1 to 100. Type a guess and press Enter. After each guess the game tells you to go HIGHER or LOWER. It also tells you when the guess lies outside 1 to 100.

- Only digits can be typed. Other keys are ignored.
- Backspace deletes the last digit.
- An empty guess is rejected and does not count as a try.

When you find the number, the game shows how many tries you took. Press any key to leave.

### Rock, paper, scissors

```
rock-paper-scissors
```

You play against the computer.

- Press `r` for rock, `p` for paper or `s` for scissors.
- Press `q` to quit.
- Upper-case keys work too.
- Any other key shows a reminder of the valid keys.

The final tally is printed when you quit.

## Using the games from code

Each game keeps its rules in a class that does not need a terminal. You can drive these classes from your own code or from tests.

- `termgames.dice.DiceGame(roll=None)`: `roll` is a function with no arguments that returns a die value. When it is left out, a random value from 1 to 6 is used.
  - `press()` takes one step. It rolls your die and returns the round's `Status` (`WIN`, `LOSE` or `DRAW`). When the round has already been played, it starts the next round instead and returns `None`.
  - `screen_lines()` returns the screen as `(row, text)` pairs.
  - `summary()` returns the final score report.
  - `termgames.dice.determine_winner(player_dice, rival_dice)` compares two rolls.
- `termgames.guess.GuessGame(secret=None)`: when `secret` is left out, it is picked at random from 1 to 100.
  - `submit(text)` evaluates a guess and returns the message to show. It updates the `tries` and `won` attributes.
  - A guess is read from a leading whole number in the text.
  - Calling `submit` after the number has been found raises `RuntimeError`.
- `termgames.rps.RpsGame(pick=None)`: `pick` is a function with no arguments that returns the computer's `Choice`. When it is left out, a random rock, paper or scissors is used.
  - `press(key)` handles one key. It returns `False` when the key is `q` or `Q`.
  - `screen_lines()` and `summary()` work as in the dice game.
  - `termgames.rps.determine_winner(player_choice, computer_choice)` decides a round.
  - `termgames.rps.choice_from_key(key)` maps `r`, `p` and `s` (either case) to a `Choice`. It returns `None` for any other key.

Each game module also has `run(stdscr, game)`. It plays a game on a curses window and returns the game when it ends.

Random numbers come from `termgames.random_utils.randint(low, high)`. It returns a whole number between `low` and `high`, and either bound can be returned. It raises `ValueError` when `low` is greater than `high`. All games share one generator, which is seeded from the clock the first time it is used.

## Running the tests

```
pip install .[test]
pytest
```