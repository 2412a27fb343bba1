from __future__ import annotations


class GameError(RuntimeError):
    """Base class for errors that end a game session."""


class DeckExhausted(GameError):
    pass


class InvalidDecision(GameError):
    pass


class RandomRangeInvalid(GameError):
    pass
