"""Error types raised by :class:`~cmdargs.args.Args` operations.

There are exactly two failure modes:

- :class:`EndOfInput` — nothing left to read (or, for ``find``, nothing in
  the whole argument list parsed). A normal, recoverable condition.
- :class:`ParseFailure` — the target type's parser rejected the argument.
  The parser's own exception is kept unmodified in ``error``.
"""

from __future__ import annotations

from typing import Generic, TypeVar

E = TypeVar("E", bound=BaseException)

# Exceptions a parser raises to reject its input. ``decimal.InvalidOperation``
# is an ArithmeticError.
PARSE_ERRORS: tuple[type[Exception], ...] = (ValueError, ArithmeticError)


class ArgsError(Exception):
    """Base class for argument access failures."""


class EndOfInput(ArgsError):
    """No argument is available at the requested position."""

    def __init__(self, message: str = "end of input") -> None:
        super().__init__(message)


class ParseFailure(ArgsError, Generic[E]):
    """The parser for the requested type rejected an argument.

    ``str(failure)`` is the wrapped error's message, so callers can surface
    it directly to the end user.
    """

    def __init__(self, error: E) -> None:
        super().__init__(error)
        self.error: E = error
        self.__cause__ = error

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseFailure):
            return NotImplemented
        return type(self.error) is type(other.error) and self.error.args == other.error.args

    def __hash__(self) -> int:
        return hash((type(self.error), self.error.args))

    def __repr__(self) -> str:
        return f"ParseFailure({self.error!r})"
