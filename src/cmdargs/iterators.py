"""Lazy iterators that pull parsed arguments out of an :class:`Args`.

Each item is either a parsed value or the :class:`ParseFailure` for the
argument under the cursor; failures are yielded, not raised. Iteration
stops once the arguments are exhausted, and never yields more items than
there were arguments remaining when iteration began. Iterating advances the
underlying cursor.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Generic, TypeVar

from cmdargs.errors import ParseFailure

if TYPE_CHECKING:
    from cmdargs.args import Args

T = TypeVar("T")


class ArgIter(Generic[T]):
    """Parse each remaining argument with ``Args.single``."""

    def __init__(self, args: Args, parse: Callable[[str], T]) -> None:
        self._args = args
        self._parse = parse
        self._budget: int | None = None

    def __iter__(self) -> Iterator[T | ParseFailure]:
        return self

    def __next__(self) -> T | ParseFailure:
        if self._budget is None:
            self._budget = self._args.remaining()
        if self._budget <= 0 or self._args.is_empty():
            raise StopIteration
        self._budget -= 1
        try:
            return self._pull()
        except ParseFailure as failure:
            return failure

    def _pull(self) -> T:
        return self._args.single(self._parse)


class QuotedArgIter(ArgIter[T]):
    """Same as :class:`ArgIter`, but strips the quotes of quoted arguments."""

    def _pull(self) -> T:
        return self._args.single_quoted(self._parse)
