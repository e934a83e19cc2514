import typing as tp
from collections.abc import Callable, Iterator
from itertools import islice

from numerate.defaults import Exhausted
from numerate.wtyping import (
    DoubleEndedProducer,
    SupportsCount,
    SupportsFold,
    SupportsNth,
    SupportsNthBack,
    SupportsRFold,
)


def check_skip(n: int) -> None:
    if n < 0:
        raise ValueError(f"Number of items to skip must be a non-negative integer, got {n=}")


def _present[T](item: T | object) -> T:
    # adapters used as producers report exhaustion with the sentinel
    if item is Exhausted:
        raise StopIteration
    return tp.cast(T, item)


def nth[T](producer: Iterator[T], n: int) -> T:
    """Item `n` positions ahead, raises StopIteration if there is none."""
    if isinstance(producer, SupportsNth):
        return _present(producer.nth(n))
    for item in islice(producer, n, None):
        return item
    raise StopIteration


def nth_back[T](producer: DoubleEndedProducer[T], n: int) -> T:
    if isinstance(producer, SupportsNthBack):
        return _present(producer.nth_back(n))
    for _ in range(n):
        _ = next_back(producer)
    return next_back(producer)


def next_back[T](producer: DoubleEndedProducer[T]) -> T:
    return _present(producer.next_back())


def count(producer: Iterator[object]) -> int:
    if isinstance(producer, SupportsCount):
        return producer.count()
    total = 0
    for _ in producer:
        total += 1
    return total


def fold[B, T](producer: Iterator[T], initial: B, func: Callable[[B, T], B]) -> B:
    if isinstance(producer, SupportsFold):
        return producer.fold(initial, func)
    acc = initial
    for item in producer:
        acc = func(acc, item)
    return acc


def rfold[B, T](
    producer: DoubleEndedProducer[T], initial: B, func: Callable[[B, T], B]
) -> B:
    if isinstance(producer, SupportsRFold):
        return producer.rfold(initial, func)
    acc = initial
    while True:
        try:
            item = next_back(producer)
        except StopIteration:
            return acc
        acc = func(acc, item)
