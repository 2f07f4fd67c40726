"""Small terminal games: a dice duel, guess the number, and rock-paper-scissors."""

__version__ = "0.1.0"