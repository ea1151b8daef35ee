from __future__ import annotations


class AtaxxError(ValueError):
    """Base class for rule violations detected by the engine."""


class IllegalMove(AtaxxError):
    pass


class IllegalBlockPlacement(AtaxxError):
    pass


class UndoUnderflow(AtaxxError):
    pass


class InvalidColorArgument(AtaxxError):
    pass


class CommandError(AtaxxError):
    pass
