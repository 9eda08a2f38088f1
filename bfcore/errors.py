"""Exceptions raised by the interpreter.

Every fatal condition aborts only the current run; the interpreter resets
itself at the start of the next one.
"""

from typing import Optional


class BrainfuckError(Exception):
    """Base class for all interpreter errors."""

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
        self.position = position


class ConfigError(BrainfuckError):
    pass


class LoopStackOverflowError(BrainfuckError):
    """Loops are nested deeper than the configured limit."""


class LoopStackUnderflowError(BrainfuckError):
    """A ']' was reached with no open loop."""


class UnterminatedLoopError(BrainfuckError):
    """A '[' has no matching ']'."""


class InstructionPointerOverrunError(BrainfuckError):
    """The instruction pointer ran off the program tape without meeting a sentinel."""


class StepLimitExceeded(BrainfuckError):
    pass
