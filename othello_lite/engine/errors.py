from __future__ import annotations


class EngineError(Exception):
    """Base class for engine programming errors."""


class IllegalMoveError(EngineError, ValueError):
    pass


class LogUnderflowError(EngineError, RuntimeError):
    """Undo/discard called without a matching apply/enumerate."""


class LogOverflowError(EngineError, RuntimeError):
    """A change log grew past its worst-case bound."""
