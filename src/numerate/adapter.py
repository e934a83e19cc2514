"""
Enumerate adapters pairing every produced item with a typed counter.

`Enumerate` works over any producer and only moves forward.
`DoubleEndedEnumerate` is used when the producer also reports its exact
remaining length and yields from its far end. Counters of items taken from
the back are computed from that length, so every item gets its true position
whichever end it was taken from.

Example:
    >>> from numerate.counter import FloatCounter
    >>> from numerate.producers import SeqProducer
    >>> e = DoubleEndedEnumerate(SeqProducer(range(5)), FloatCounter.default())
    >>> next(e), e.next_back(), len(e)
    (Numbered(count=0.0, value=0), Numbered(count=4.0, value=4), 3)
"""

from __future__ import annotations

import copy
import logging
import typing as tp
from collections.abc import Callable, Iterator
from operator import length_hint

from numerate import _helpers
from numerate._helpers import check_skip
from numerate.counter import Counter
from numerate.defaults import Default, Exhausted, NoDefault
from numerate.wtyping import DoubleEndedProducer, SupportsSizeHint

logger = logging.getLogger(__name__)


class Numbered[N, T](tp.NamedTuple):
    count: N
    value: T


class Enumerate[T, N](Iterator[Numbered[N, T]]):
    """
    Iterator yielding `Numbered(count, value)` pairs, with a counter of any
    registered numeric type.

    Once the producer runs out, every later call reports exhaustion without
    touching the producer or the counter again.

    Args:
        producer: iterator whose items are numbered
        counter: counter holding the position of the next front item
    """

    __slots__ = ("_count", "_exhausted", "_iter")

    def __init__(self, producer: Iterator[T], counter: Counter[N]) -> None:
        self._iter = producer
        self._count = counter
        self._exhausted = False

    @property
    def counter(self) -> N:
        """Count that the next item taken from the front will carry.

        Example:
            >>> from numerate.counter import IntCounter
            >>> e = Enumerate(iter("ab"), IntCounter(10))
            >>> _ = next(e); e.counter
            11
        """
        return self._count.value

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def _exhaust(self) -> None:
        if not self._exhausted:
            logger.debug("%r exhausted", self)
        self._exhausted = True

    def _missing[TDefault](self, default: TDefault) -> TDefault:
        self._exhaust()
        if default is NoDefault:
            raise StopIteration
        return default

    @tp.override
    def __iter__(self) -> Iterator[Numbered[N, T]]:
        return self

    @tp.override
    def __next__(self) -> Numbered[N, T]:
        if self._exhausted:
            raise StopIteration
        try:
            item = next(self._iter)
        except StopIteration:
            self._exhaust()
            raise StopIteration from None
        count = self._count.value
        self._count.inc()
        return Numbered(count, item)

    @tp.overload
    def nth(self, n: int, default: tp.Literal[Default.NoDefault]) -> Numbered[N, T]: ...
    @tp.overload
    def nth[TDefault](
        self, n: int, default: TDefault = Exhausted
    ) -> Numbered[N, T] | TDefault: ...
    def nth[TDefault](
        self, n: int, default: TDefault = Exhausted
    ) -> Numbered[N, T] | TDefault:
        """Skip n items and return the one after them.

        The producer skips in bulk, the counter then moves by n in one step.

        Args:
            n: number of items to skip
            default (optional): returned if the producer runs out.
                If default is NoDefault, StopIteration is raised instead.
                default: Default.Exhausted

        Returns:
            Numbered | TDefault: the numbered item, or default.

        Raises:
            ValueError: if n is negative

        Example:
            >>> from numerate.counter import IntCounter
            >>> e = Enumerate(iter(range(5)), IntCounter())
            >>> e.nth(1)
            Numbered(count=1, value=1)
            >>> e.nth(0)
            Numbered(count=2, value=2)
            >>> e.nth(5)
            <Default.Exhausted: 1>
        """
        check_skip(n)
        if self._exhausted:
            return self._missing(default)
        try:
            item = _helpers.nth(self._iter, n)
        except StopIteration:
            return self._missing(default)
        self._count.inc_n(n)
        count = self._count.value
        self._count.inc()
        return Numbered(count, item)

    def count(self) -> int:
        """Number of remaining items; the counter plays no part.

        Leaves self exhausted.
        """
        if self._exhausted:
            return 0
        remaining = _helpers.count(self._iter)
        self._exhaust()
        return remaining

    def fold[B](self, initial: B, func: Callable[[B, Numbered[N, T]], B]) -> B:
        """Reduce the remaining items front to back, through the producer's own
        fold when it has one.

        Example:
            >>> from numerate.counter import IntCounter
            >>> e = Enumerate(iter("abc"), IntCounter())
            >>> e.fold("", lambda acc, pair: acc + f"{pair.count}{pair.value}")
            '0a1b2c'
        """
        if self._exhausted:
            return initial
        counter = self._count

        def step(acc: B, item: T) -> B:
            acc = func(acc, Numbered(counter.value, item))
            counter.inc()
            return acc

        result = _helpers.fold(self._iter, initial, step)
        self._exhaust()
        return result

    def size_hint(self) -> tuple[int, int | None]:
        if isinstance(self._iter, SupportsSizeHint):
            return self._iter.size_hint()
        return length_hint(self._iter), None

    def __length_hint__(self) -> int:
        return length_hint(self._iter)

    def __copy__(self) -> tp.Self:
        new = type(self).__new__(type(self))
        new._iter = copy.copy(self._iter)
        new._count = self._count.copy()
        new._exhausted = self._exhausted
        return new

    @tp.override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(producer={self._iter!r}, counter={self._count!r})"


@tp.final
class DoubleEndedEnumerate[T, N](Enumerate[T, N]):
    """
    Enumerate over a double-ended, exact-size producer.

    The stored counter only ever tracks the front. An item taken from the back
    gets the stored counter plus the number of items still left in front of it.

    Example:
        >>> from numerate.counter import IntCounter
        >>> from numerate.producers import SeqProducer
        >>> e = DoubleEndedEnumerate(SeqProducer(range(5)), IntCounter())
        >>> e.nth_back(1), e.nth(0), e.nth(0)
        (Numbered(count=3, value=3), Numbered(count=0, value=0), Numbered(count=1, value=1))
    """

    __slots__ = ()

    _iter: DoubleEndedProducer[T]

    def __init__(self, producer: DoubleEndedProducer[T], counter: Counter[N]) -> None:
        super().__init__(producer, counter)

    def __len__(self) -> int:
        return len(self._iter)

    def _count_from_back(self) -> N:
        count = self._count.copy()
        count.inc_n(len(self._iter))
        return count.value

    @tp.overload
    def next_back(self, default: tp.Literal[Default.NoDefault]) -> Numbered[N, T]: ...
    @tp.overload
    def next_back[TDefault](
        self, default: TDefault = Exhausted
    ) -> Numbered[N, T] | TDefault: ...
    def next_back[TDefault](
        self, default: TDefault = Exhausted
    ) -> Numbered[N, T] | TDefault:
        """Take the last remaining item, or return default."""
        if self._exhausted:
            return self._missing(default)
        try:
            item = _helpers.next_back(self._iter)
        except StopIteration:
            return self._missing(default)
        return Numbered(self._count_from_back(), item)

    @tp.overload
    def nth_back(self, n: int, default: tp.Literal[Default.NoDefault]) -> Numbered[N, T]: ...
    @tp.overload
    def nth_back[TDefault](
        self, n: int, default: TDefault = Exhausted
    ) -> Numbered[N, T] | TDefault: ...
    def nth_back[TDefault](
        self, n: int, default: TDefault = Exhausted
    ) -> Numbered[N, T] | TDefault:
        """Skip n items from the back and return the one before them.

        The stored counter is left alone; it still belongs to the front item.

        Raises:
            ValueError: if n is negative
        """
        check_skip(n)
        if self._exhausted:
            return self._missing(default)
        try:
            item = _helpers.nth_back(self._iter, n)
        except StopIteration:
            return self._missing(default)
        return Numbered(self._count_from_back(), item)

    def rfold[B](self, initial: B, func: Callable[[B, Numbered[N, T]], B]) -> B:
        """Reduce the remaining items back to front, with descending counts.

        Example:
            >>> from numerate.counter import IntCounter
            >>> from numerate.producers import SeqProducer
            >>> e = DoubleEndedEnumerate(SeqProducer("abc"), IntCounter())
            >>> _ = next(e)
            >>> e.rfold([], lambda acc, pair: [*acc, tuple(pair)])
            [(2, 'c'), (1, 'b')]
        """
        if self._exhausted:
            return initial
        count = self._count.copy()
        count.inc_n(len(self._iter))

        def step(acc: B, item: T) -> B:
            count.dec()
            return func(acc, Numbered(count.value, item))

        result = _helpers.rfold(self._iter, initial, step)
        self._exhaust()
        return result

    def __reversed__(self) -> Iterator[Numbered[N, T]]:
        while (item := self.next_back()) is not Exhausted:
            yield item
