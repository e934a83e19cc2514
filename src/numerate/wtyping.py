"""
Capabilities a wrapped producer may offer.

Only `__next__` is required from a producer. Everything else is optional and
is replaced by a per-element fallback when missing.
"""

import typing as tp
from collections.abc import Callable, Iterator


@tp.runtime_checkable
class SupportsNth[T](tp.Protocol):
    def nth(self, n: int, /) -> T: ...


@tp.runtime_checkable
class SupportsCount(tp.Protocol):
    def count(self) -> int: ...


@tp.runtime_checkable
class SupportsFold[T](tp.Protocol):
    def fold[B](self, initial: B, func: Callable[[B, T], B], /) -> B: ...


@tp.runtime_checkable
class SupportsSizeHint(tp.Protocol):
    def size_hint(self) -> tuple[int, int | None]: ...


@tp.runtime_checkable
class SupportsNthBack[T](tp.Protocol):
    def nth_back(self, n: int, /) -> T: ...


@tp.runtime_checkable
class SupportsRFold[T](tp.Protocol):
    def rfold[B](self, initial: B, func: Callable[[B, T], B], /) -> B: ...


@tp.runtime_checkable
class DoubleEndedProducer[T](Iterator[T], tp.Protocol):
    """Exact-size producer that can also yield from its far end.

    `__len__` reports the exact number of remaining items, `next_back`
    raises StopIteration once nothing is left. Adapters acting as producers
    return `Exhausted` instead, which is read the same way.
    """

    def __len__(self) -> int: ...
    def next_back(self) -> T: ...
