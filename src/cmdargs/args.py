"""Cursor-based access to the arguments of a command message.

:class:`Args` owns the original message and the non-delimiter tokens scanned
from it. A cursor points at the next token to read; ``single`` and friends
parse the token under the cursor, ``rewind``/``restore`` move it back, and
``find`` searches every token regardless of the cursor.

Target types are given as *parsers*: any callable taking the argument text
and returning a value, raising :class:`ValueError` (or, like
``decimal.Decimal``, an :class:`ArithmeticError`) when the text does not fit
(``int``, ``float``, ``uuid.UUID``, an ``Enum`` class, ...). Parser errors
surface as :class:`~cmdargs.errors.ParseFailure`; running out of
arguments surfaces as :class:`~cmdargs.errors.EndOfInput`.

Example
-------
>>> args = Args("4 20", [" "])
>>> args.single(int)
4
>>> args.rewind()
>>> args.single(int) * 2
8
>>> args.restore()
>>> args.single() + args.single()
'420'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar, overload

from cmdargs.config import ArgsConfig, load_config
from cmdargs.errors import PARSE_ERRORS, EndOfInput, ParseFailure
from cmdargs.iterators import ArgIter, QuotedArgIter
from cmdargs.tokenizer import QUOTE, Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

T = TypeVar("T")

Parser = Callable[[str], T]


def _parse(parse: Parser[T], text: str) -> T:
    try:
        return parse(text)
    except PARSE_ERRORS as exc:
        raise ParseFailure(exc) from exc


class Args:
    """The arguments of one command invocation, with a read cursor.

    Two ``Args`` are equal when their original messages are equal; an
    ``Args`` also equals the plain string of its message.
    """

    def __init__(self, message: str, delimiters: Iterable[str]) -> None:
        self._message = message
        self._tokens: list[Token] = [
            t for t in tokenize(message, delimiters) if t.kind is not TokenKind.DELIMITER
        ]
        self._cursor: int = 0
        logger.debug("Scanned %d argument(s) from %r", len(self._tokens), message)

    @classmethod
    def from_config(cls, message: str, config: ArgsConfig | None = None) -> Args:
        """Build from the delimiters of *config* (loaded from the environment if omitted)."""
        if config is None:
            config = load_config()
        return cls(message, config.delimiters)

    @property
    def cursor(self) -> int:
        """Index of the next token to be read."""
        return self._cursor

    @property
    def tokens(self) -> tuple[Token, ...]:
        """Snapshot of the tokens currently held."""
        return tuple(self._tokens)

    def __len__(self) -> int:
        """Number of recognised arguments. Only a successful ``find`` lowers it."""
        return len(self._tokens)

    def is_empty(self) -> bool:
        """True if there are no arguments left to read."""
        return self._cursor >= len(self._tokens)

    def remaining(self) -> int:
        """Number of arguments still available to read."""
        if self.is_empty():
            return 0
        return len(self._tokens) - self._cursor

    def _current(self) -> Token:
        if self.is_empty():
            raise EndOfInput()
        return self._tokens[self._cursor]

    @overload
    def single(self) -> str: ...
    @overload
    def single(self, parse: Parser[T]) -> T: ...
    def single(self, parse: Parser[Any] = str) -> Any:
        """Parse the current argument and advance.

        The literal is parsed as written, quotes included. On a parse
        failure the cursor stays put.
        """
        value = _parse(parse, self._current().literal)
        self._cursor += 1
        return value

    @overload
    def single_n(self) -> str: ...
    @overload
    def single_n(self, parse: Parser[T]) -> T: ...
    def single_n(self, parse: Parser[Any] = str) -> Any:
        """Like :meth:`single`, but doesn't advance."""
        return _parse(parse, self._current().literal)

    @overload
    def single_quoted(self) -> str: ...
    @overload
    def single_quoted(self, parse: Parser[T]) -> T: ...
    def single_quoted(self, parse: Parser[Any] = str) -> Any:
        """Like :meth:`single`, but strips the quote pair of a quoted argument.

        >>> Args('"42 69"', [" "]).single_quoted()
        '42 69'
        """
        value = _parse(parse, self._current().unquoted)
        self._cursor += 1
        return value

    @overload
    def single_quoted_n(self) -> str: ...
    @overload
    def single_quoted_n(self, parse: Parser[T]) -> T: ...
    def single_quoted_n(self, parse: Parser[Any] = str) -> Any:
        """Like :meth:`single_quoted`, but doesn't advance."""
        return _parse(parse, self._current().unquoted)

    def skip(self) -> str | None:
        """Consume the current argument, returning its literal.

        Returns None, without consuming anything, once the arguments are
        exhausted.
        """
        if self.is_empty():
            return None
        try:
            return self.single(str)
        except ParseFailure:
            return None

    def skip_for(self, count: int) -> list[str] | None:
        """Call :meth:`skip` *count* times.

        Returns None as soon as one skip comes back empty. Skips that
        succeeded before that point are not undone.
        """
        skipped: list[str] = []
        for _ in range(count):
            literal = self.skip()
            if literal is None:
                return None
            skipped.append(literal)
        return skipped

    @overload
    def iter(self) -> ArgIter[str]: ...
    @overload
    def iter(self, parse: Parser[T]) -> ArgIter[T]: ...
    def iter(self, parse: Parser[Any] = str) -> ArgIter[Any]:
        """Lazily parse the remaining arguments with :meth:`single`."""
        return ArgIter(self, parse)

    @overload
    def iter_quoted(self) -> QuotedArgIter[str]: ...
    @overload
    def iter_quoted(self, parse: Parser[T]) -> QuotedArgIter[T]: ...
    def iter_quoted(self, parse: Parser[Any] = str) -> QuotedArgIter[Any]:
        """Lazily parse the remaining arguments with :meth:`single_quoted`."""
        return QuotedArgIter(self, parse)

    @overload
    def multiple(self) -> list[str]: ...
    @overload
    def multiple(self, parse: Parser[T]) -> list[T]: ...
    def multiple(self, parse: Parser[Any] = str) -> list[Any]:
        """Parse all remaining arguments, raising on the first parse failure.

        >>> Args("42 69", [" "]).multiple(int)
        [42, 69]
        """
        if self.is_empty():
            raise EndOfInput()
        return _collect(self.iter(parse))

    @overload
    def multiple_quoted(self) -> list[str]: ...
    @overload
    def multiple_quoted(self, parse: Parser[T]) -> list[T]: ...
    def multiple_quoted(self, parse: Parser[Any] = str) -> list[Any]:
        """Like :meth:`multiple`, but strips the quote pair of quoted arguments."""
        if self.is_empty():
            raise EndOfInput()
        return _collect(self.iter_quoted(parse))

    def _search(self, parse: Parser[T]) -> tuple[int, T]:
        for pos, token in enumerate(self._tokens):
            try:
                return pos, parse(token.unquoted)
            except PARSE_ERRORS:
                continue
        raise EndOfInput()

    @overload
    def find(self) -> str: ...
    @overload
    def find(self, parse: Parser[T]) -> T: ...
    def find(self, parse: Parser[Any] = str) -> Any:
        """Return the first argument anywhere in the message that parses.

        Quotes are taken into account. The matched argument is removed for
        good and the cursor goes back to the start. When nothing parses,
        :class:`EndOfInput` is raised and nothing changes.

        >>> args = Args("c42 69", [" "])
        >>> args.find(int)
        69
        >>> args.single()
        'c42'
        """
        pos, value = self._search(parse)
        removed = self._tokens.pop(pos)
        self._cursor = 0
        logger.debug("Removed argument %r at index %d", removed.literal, pos)
        return value

    @overload
    def find_n(self) -> str: ...
    @overload
    def find_n(self, parse: Parser[T]) -> T: ...
    def find_n(self, parse: Parser[Any] = str) -> Any:
        """Like :meth:`find`, but leaves the argument (and the cursor) in place."""
        return self._search(parse)[1]

    def full(self) -> str:
        """The original message."""
        return self._message

    def full_quoted(self) -> str:
        """The original message without its surrounding quotes.

        Only stripped when the message starts with a quote and a later
        closing quote exists; otherwise returned as is.
        """
        s = self._message
        if not s.startswith(QUOTE):
            return s
        end = s.rfind(QUOTE)
        # The only quote is the opening one.
        if end == 0:
            return s
        return s[1:end]

    def rest(self) -> str:
        """The message from the current argument onward, as originally written."""
        if self.is_empty():
            return ""
        return self._message[self._tokens[self._cursor].index :]

    def rewind(self) -> None:
        """Go one argument back. No-op at the start."""
        if self._cursor == 0:
            return
        self._cursor -= 1

    def restore(self) -> None:
        """Go back to the first argument."""
        self._cursor = 0

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"Args({self._message!r}, cursor={self._cursor}, len={len(self._tokens)})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Args):
            return self._message == other._message
        if isinstance(other, str):
            return self._message == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._message)

    def __copy__(self) -> Args:
        dup = type(self).__new__(type(self))
        dup._message = self._message
        dup._tokens = list(self._tokens)
        dup._cursor = self._cursor
        return dup


def _collect(items: Iterable[T | ParseFailure]) -> list[T]:
    values: list[T] = []
    for item in items:
        if isinstance(item, ParseFailure):
            raise item
        values.append(item)
    return values
