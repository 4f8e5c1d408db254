"""Delimiter- and quote-aware tokenizer for command text.

Splits a message on a configurable set of delimiter characters while keeping
double-quoted regions together. Every token remembers where it started, both
as a ``str`` index and as a UTF-8 byte offset, so callers can slice the
original text back out exactly.

Delimiters are single characters. A configured delimiter string such as
``", "`` contributes *each* of its characters as an independent boundary,
and only when the string itself occurs somewhere in the message.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

QUOTE = '"'


class TokenKind(enum.Enum):
    """Classification of a scanned token."""

    DELIMITER = "delimiter"
    ARGUMENT = "argument"
    QUOTED_ARGUMENT = "quoted_argument"


@dataclass(frozen=True)
class Token:
    """A scanned unit of the message.

    ``literal`` is the exact source text (quotes included for
    ``QUOTED_ARGUMENT``), ``index`` its starting ``str`` index and
    ``position`` its starting UTF-8 byte offset.
    """

    kind: TokenKind
    literal: str
    position: int
    index: int

    @property
    def unquoted(self) -> str:
        """The literal with its surrounding quote pair removed, if quoted."""
        if self.kind is TokenKind.QUOTED_ARGUMENT:
            return self.literal[1:-1]
        return self.literal


def _utf8_len(s: str) -> int:
    return len(s.encode("utf-8", "surrogatepass"))


def build_delimiters(message: str, delimiters: Iterable[str]) -> frozenset[str]:
    """Return the set of boundary characters active for *message*.

    Only delimiter strings that occur in *message* are kept; their characters
    are then flattened into one set.

    >>> sorted(build_delimiters("a, b", [", ", ";"]))
    [' ', ',']
    """
    return frozenset(ch for d in delimiters if d in message for ch in d)


def _consume_quoted(s: str, i: int) -> int | None:
    """Find the closing quote for the opening quote at *i*.

    Returns the index just past the closing quote, or ``None`` when the
    text ends first.
    """
    end = s.find(QUOTE, i + 1)
    if end == -1:
        return None
    return end + 1


def tokenize(message: str, delimiters: Iterable[str]) -> list[Token]:
    """Scan *message* into delimiter, argument and quoted-argument tokens.

    A double quote opens a quoted argument that runs to the next double
    quote, delimiters included. If no closing quote follows, the opening
    quote is ordinary text and the argument runs to the end of the message.

    Examples
    --------
    >>> [t.literal for t in tokenize('say "hello world" !', [" "])]
    ['say', ' ', '"hello world"', ' ', '!']
    >>> [t.literal for t in tokenize('say "hello world', [" "])]
    ['say', ' ', '"hello world']
    """
    delims = build_delimiters(message, delimiters)
    tokens: list[Token] = []
    i = 0
    n = len(message)
    byte_pos = 0

    while i < n:
        ch = message[i]
        start = i

        if ch in delims:
            kind = TokenKind.DELIMITER
            i += 1
        elif ch == QUOTE:
            end = _consume_quoted(message, i)
            if end is None:
                logger.debug("Unterminated quote at index %d, treating as plain text", i)
                kind = TokenKind.ARGUMENT
                i = n
            else:
                kind = TokenKind.QUOTED_ARGUMENT
                i = end
        else:
            kind = TokenKind.ARGUMENT
            while i < n and message[i] not in delims:
                i += 1

        literal = message[start:i]
        tokens.append(Token(kind=kind, literal=literal, position=byte_pos, index=start))
        byte_pos += _utf8_len(literal)

    return tokens
