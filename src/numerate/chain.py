"""
Wrap any iterable into an Enumerate with a counter of a chosen numeric type.

Example:
    >>> list(enumerate_float("some"))
    [Numbered(count=0.0, value='s'), Numbered(count=1.0, value='o'), Numbered(count=2.0, value='m'), Numbered(count=3.0, value='e')]
    >>> Iter(range(3)).enumerate_int(start=1).next_back()
    Numbered(count=3, value=2)
"""

from __future__ import annotations

import logging
import typing as tp
from collections.abc import Callable, Iterable, Iterator, Sequence
from decimal import Decimal
from fractions import Fraction
from functools import wraps

import numpy as np

from numerate.adapter import DoubleEndedEnumerate, Enumerate
from numerate.counter import Counter, counter_type
from numerate.defaults import Default, NoDefault
from numerate.producers import into_producer
from numerate.wtyping import DoubleEndedProducer

logger = logging.getLogger(__name__)


@tp.overload
def enumerate_number[T, N](
    iterable: Sequence[T] | DoubleEndedProducer[T],
    counter: type[N] | type[Counter[N]],
    *,
    start: object = None,
) -> DoubleEndedEnumerate[T, N]: ...
@tp.overload
def enumerate_number[T, N](
    iterable: Iterable[T],
    counter: type[N] | type[Counter[N]],
    *,
    start: object = None,
) -> Enumerate[T, N]: ...
def enumerate_number[T, N](
    iterable: Iterable[T],
    counter: type[N] | type[Counter[N]],
    *,
    start: object = None,
) -> Enumerate[T, N]:
    """
    Number the items of iterable with a counter of type `counter`.

    Sequences and double-ended producers give a DoubleEndedEnumerate, which
    can also be consumed from the back; anything else gives a forward-only
    Enumerate.

    Args:
        iterable: items to number
        counter: numeric type of the counter (np.int8, float, Decimal, ...),
            or a Counter subclass
        start (optional): first count, converted to the counter type.
            default: zero of the counter type

    Returns:
        Enumerate | DoubleEndedEnumerate: the adapter, owning the producer.

    Raises:
        UnsupportedCounterError: if no counter is registered for `counter`

    Example:
        >>> e = enumerate_number(range(3), Fraction, start=Fraction(1, 2))
        >>> [str(count) for count, _ in e]
        ['1/2', '3/2', '5/2']
        >>> type(enumerate_number(iter("ab"), int)).__name__
        'Enumerate'
    """
    count = counter_type(counter)(start)
    producer = into_producer(iterable._iter if isinstance(iterable, Iter) else iterable)
    double_ended = isinstance(producer, DoubleEndedProducer)
    logger.debug(
        "numbering %r with %s (double-ended: %s)",
        producer,
        type(count).__name__,
        double_ended,
    )
    if double_ended:
        return DoubleEndedEnumerate(producer, count)
    return Enumerate(producer, count)


class Enumerator[N](tp.Protocol):
    @tp.overload
    def __call__[T](
        self, iterable: Sequence[T] | DoubleEndedProducer[T], /, *, start: object = None
    ) -> DoubleEndedEnumerate[T, N]: ...
    @tp.overload
    def __call__[T](
        self, iterable: Iterable[T], /, *, start: object = None
    ) -> Enumerate[T, N]: ...


def enumerate_as[N](numeric_type: type[N], name: str) -> Enumerator[N]:
    """Build the `enumerate_<name>` shortcut for one numeric type."""

    def enumerator[T](iterable: Iterable[T], /, *, start: object = None) -> Enumerate[T, N]:
        return enumerate_number(iterable, numeric_type, start=start)

    enumerator.__name__ = enumerator.__qualname__ = f"enumerate_{name}"
    enumerator.__doc__ = (
        f"Like enumerate_number, with a {numeric_type.__name__} counter."
    )
    return tp.cast(Enumerator[N], enumerator)


enumerate_i8 = enumerate_as(np.int8, "i8")
enumerate_i16 = enumerate_as(np.int16, "i16")
enumerate_i32 = enumerate_as(np.int32, "i32")
enumerate_i64 = enumerate_as(np.int64, "i64")
enumerate_isize = enumerate_as(np.intp, "isize")
enumerate_u8 = enumerate_as(np.uint8, "u8")
enumerate_u16 = enumerate_as(np.uint16, "u16")
enumerate_u32 = enumerate_as(np.uint32, "u32")
enumerate_u64 = enumerate_as(np.uint64, "u64")
enumerate_usize = enumerate_as(np.uintp, "usize")
enumerate_f16 = enumerate_as(np.float16, "f16")
enumerate_f32 = enumerate_as(np.float32, "f32")
enumerate_f64 = enumerate_as(np.float64, "f64")
enumerate_int = enumerate_as(int, "int")
enumerate_float = enumerate_as(float, "float")
enumerate_decimal = enumerate_as(Decimal, "decimal")
enumerate_fraction = enumerate_as(Fraction, "fraction")


class MethodKind[T]:
    @staticmethod
    def consumer[**P, R](
        func: Callable[tp.Concatenate[Iterable[T], P], R],
    ) -> Callable[tp.Concatenate[Iter[T], P], R]:
        @wraps(func)
        def inner(self: Iter[T], *args: P.args, **kwargs: P.kwargs) -> R:
            return func(self, *args, **kwargs)

        return inner

    @staticmethod
    def enumerator[N](
        func: Enumerator[N],
    ) -> Callable[[Iter[T]], Enumerate[T, N]]:
        @wraps(func)  # pyright: ignore[reportArgumentType]
        def inner(self: Iter[T], *, start: object = None) -> Enumerate[T, N]:
            return func(self._iter, start=start)

        return inner


@tp.final
class Iter[T](Iterator[T]):
    """
    Iterator over a given iterable, providing the enumerate_* calls as methods.

    Sequences are kept double-ended, so enumerating an Iter built from one
    gives a DoubleEndedEnumerate. Enumerating hands the producer over to the
    new adapter; advancing both afterwards interleaves them.

    Args:
        iterable: an iterable that is to be turned into an Iter

    Example:
        >>> it = Iter("some")
        >>> it.next()
        's'
        >>> list(it.enumerate_int())
        [Numbered(count=0, value='o'), Numbered(count=1, value='m'), Numbered(count=2, value='e')]
    """

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self.iterable = iterable
        self._iter: Iterator[T] = (
            iterable._iter if isinstance(iterable, Iter) else into_producer(iterable)
        )

    @tp.override
    def __iter__(self) -> Iterator[T]:
        return self

    @tp.override
    def __next__(self) -> T:
        return next(self._iter)

    @tp.overload
    def next(self, default: tp.Literal[Default.NoDefault] = NoDefault) -> T: ...
    @tp.overload
    def next[TDefault](self, default: TDefault) -> T | TDefault: ...
    def next[TDefault](self, default: TDefault = NoDefault) -> T | TDefault:
        """next value in the iterator.

        Returns:
            next value or default
        """
        return next(self) if default is NoDefault else next(self, default)

    to_list = MethodKind[T].consumer(list)
    """convert to list"""

    def enumerate_number[N](
        self, counter: type[N] | type[Counter[N]], *, start: object = None
    ) -> Enumerate[T, N]:
        """see numerate.chain.enumerate_number"""
        return enumerate_number(self._iter, counter, start=start)

    enumerate_i8 = MethodKind[T].enumerator(enumerate_i8)
    enumerate_i16 = MethodKind[T].enumerator(enumerate_i16)
    enumerate_i32 = MethodKind[T].enumerator(enumerate_i32)
    enumerate_i64 = MethodKind[T].enumerator(enumerate_i64)
    enumerate_isize = MethodKind[T].enumerator(enumerate_isize)
    enumerate_u8 = MethodKind[T].enumerator(enumerate_u8)
    enumerate_u16 = MethodKind[T].enumerator(enumerate_u16)
    enumerate_u32 = MethodKind[T].enumerator(enumerate_u32)
    enumerate_u64 = MethodKind[T].enumerator(enumerate_u64)
    enumerate_usize = MethodKind[T].enumerator(enumerate_usize)
    enumerate_f16 = MethodKind[T].enumerator(enumerate_f16)
    enumerate_f32 = MethodKind[T].enumerator(enumerate_f32)
    enumerate_f64 = MethodKind[T].enumerator(enumerate_f64)
    enumerate_int = MethodKind[T].enumerator(enumerate_int)
    enumerate_float = MethodKind[T].enumerator(enumerate_float)
    enumerate_decimal = MethodKind[T].enumerator(enumerate_decimal)
    enumerate_fraction = MethodKind[T].enumerator(enumerate_fraction)

    @tp.override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(iterable={self.iterable!r})"
