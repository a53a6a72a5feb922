from __future__ import annotations


class BoardError(ValueError):
    """Input that cannot be turned into an evaluable board."""


class BoardFormatError(BoardError):
    pass


class PlayerError(BoardError):
    pass
