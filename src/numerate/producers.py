from __future__ import annotations

import typing as tp
from collections.abc import Callable, Iterable, Iterator, Sequence

from numerate._helpers import check_skip
from numerate.wtyping import DoubleEndedProducer


@tp.final
class SeqProducer[T](Iterator[T]):
    """
    Double-ended, exact-size producer over a Sequence.

    Keeps a front and a back cursor into the sequence, so items can be taken
    from either end and skipped in O(1).

    Args:
        seq: the sequence to produce items from

    Example:
        >>> p = SeqProducer("some")
        >>> next(p), p.next_back(), len(p)
        ('s', 'e', 2)
        >>> p.nth(1)
        'm'
        >>> len(p)
        0
    """

    __slots__ = ("_back", "_front", "_seq")

    def __init__(self, seq: Sequence[T]) -> None:
        self._seq = seq
        self._front = 0
        self._back = len(seq)

    @tp.override
    def __iter__(self) -> Iterator[T]:
        return self

    @tp.override
    def __next__(self) -> T:
        if self._front >= self._back:
            raise StopIteration
        item = self._seq[self._front]
        self._front += 1
        return item

    def next_back(self) -> T:
        if self._front >= self._back:
            raise StopIteration
        self._back -= 1
        return self._seq[self._back]

    def nth(self, n: int) -> T:
        check_skip(n)
        self._front = min(self._front + n, self._back)
        return next(self)

    def nth_back(self, n: int) -> T:
        check_skip(n)
        self._back = max(self._back - n, self._front)
        return self.next_back()

    def __len__(self) -> int:
        return self._back - self._front

    def __length_hint__(self) -> int:
        return len(self)

    def size_hint(self) -> tuple[int, int | None]:
        return len(self), len(self)

    def count(self) -> int:
        remaining = len(self)
        self._front = self._back
        return remaining

    def fold[B](self, initial: B, func: Callable[[B, T], B]) -> B:
        indices = range(self._front, self._back)
        self._front = self._back
        acc = initial
        for item in map(self._seq.__getitem__, indices):
            acc = func(acc, item)
        return acc

    def rfold[B](self, initial: B, func: Callable[[B, T], B]) -> B:
        indices = range(self._back - 1, self._front - 1, -1)
        self._back = self._front
        acc = initial
        for item in map(self._seq.__getitem__, indices):
            acc = func(acc, item)
        return acc

    def __copy__(self) -> SeqProducer[T]:
        new = SeqProducer(self._seq)
        new._front, new._back = self._front, self._back
        return new

    @tp.override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._seq!r}, front={self._front}, back={self._back})"


@tp.overload
def into_producer[T](iterable: DoubleEndedProducer[T] | Sequence[T]) -> DoubleEndedProducer[T]: ...
@tp.overload
def into_producer[T](iterable: Iterable[T]) -> Iterator[T]: ...
def into_producer[T](iterable: Iterable[T]) -> Iterator[T]:
    """
    Turn an iterable into the most capable producer available for it.

    Returns:
        `iterable` itself if it already is a double-ended producer, a
        SeqProducer for sequences, and a plain iterator otherwise.

    Example:
        >>> into_producer(range(3))
        SeqProducer(range(0, 3), front=0, back=3)
        >>> isinstance(into_producer(x for x in "ab"), SeqProducer)
        False
    """
    if isinstance(iterable, DoubleEndedProducer):
        return iterable
    if isinstance(iterable, Sequence):
        return SeqProducer(iterable)
    return iter(iterable)
