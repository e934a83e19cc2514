"""
Numeric counters used by the enumerate adapters.

A counter is a small mutable cell holding the position that will be handed
to the next yielded item. Each supported numeric type gets its own `Counter`
subclass, generated once by `register_counter`, so the adapters never branch
on the numeric type while stepping.

Overflow and rounding are whatever the numeric type does on its own:

- numpy integers wrap around, and numpy reports it through `numpy.errstate`;
  `inc_n(n)` lands where n calls to `inc` would, even for an n the type
  cannot hold;
- floats round once the step falls below their precision;
- `int` and `Fraction` never overflow;
- `Decimal` follows the active decimal context.

Example:
    >>> c = counter_type(int).default()
    >>> c.inc(); c.inc_n(3); c.value
    4
    >>> c.dec(); c.value
    3
"""

from __future__ import annotations

import logging
import typing as tp
from decimal import Decimal
from fractions import Fraction

import numpy as np

logger = logging.getLogger(__name__)


class UnsupportedCounterError(TypeError):
    """Raised when no counter is registered for the requested numeric type."""


class Counter[N]:
    """Mutable position counter over the numeric type `numeric_type`."""

    __slots__ = ("value",)

    numeric_type: tp.ClassVar[type[tp.Any]]
    _one: tp.ClassVar[tp.Any]

    def __init__(self, start: object = None) -> None:
        self.value: N = self.numeric_type(0 if start is None else start)

    @classmethod
    def default(cls) -> tp.Self:
        """Counter set to the zero-equivalent of its numeric type."""
        return cls()

    def inc(self) -> None:
        self.value += self._one

    def dec(self) -> None:
        self.value -= self._one

    def inc_n(self, n: int) -> None:
        """Add `n` in place, the same as calling `inc` n times."""
        if n:
            self.value += self.numeric_type(n)

    def copy(self) -> tp.Self:
        new = type(self).__new__(type(self))
        new.value = self.value
        return new

    @tp.override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


class FixedWidthCounter[N](Counter[N]):
    """Counter over a numpy integer type, wrapping around at its bounds."""

    __slots__ = ()

    _min: tp.ClassVar[int]
    _span: tp.ClassVar[int]
    _max: tp.ClassVar[tp.Any]

    @tp.override
    def inc_n(self, n: int) -> None:
        if not n:
            return
        exact = int(self.value) + n  # pyright: ignore[reportArgumentType]
        wrapped = (exact - self._min) % self._span + self._min
        if wrapped != exact:
            # overflows the way the n-th inc would
            _ = self._max + self._one
        self.value = self.numeric_type(wrapped)


_registry: dict[type[tp.Any], type[Counter[tp.Any]]] = {}


def register_counter[N](
    numeric_type: type[N], *, name: str | None = None
) -> type[Counter[N]]:
    """Create and register the counter class for `numeric_type`.

    Registering the same numeric type twice returns the existing class, so
    aliases such as `numpy.intp` resolve to one counter.

    Args:
        numeric_type: callable type that builds a number from an int.
        name: prefix of the generated class name (default: the type's name).

    Returns:
        the Counter subclass for `numeric_type`.

    Example:
        >>> register_counter(Fraction).default()
        FractionCounter(Fraction(0, 1))
    """
    if (existing := _registry.get(numeric_type)) is not None:
        return existing
    prefix = name or numeric_type.__name__.capitalize()
    namespace: dict[str, object] = {
        "__slots__": (),
        "numeric_type": numeric_type,
        "_one": numeric_type(1),
    }
    base: type[Counter[tp.Any]] = Counter
    if issubclass(numeric_type, np.integer):
        info = np.iinfo(numeric_type)
        base = FixedWidthCounter
        namespace.update(
            _min=int(info.min), _span=2**info.bits, _max=numeric_type(info.max)
        )
    cls = tp.cast(type[Counter[N]], type(f"{prefix}Counter", (base,), namespace))
    cls.__module__ = __name__
    _registry[numeric_type] = cls
    logger.debug("registered counter %s for %r", cls.__name__, numeric_type)
    return cls


def counter_type[N](counter: type[N] | type[Counter[N]]) -> type[Counter[N]]:
    """Resolve a numeric type, or a Counter subclass, to its counter class.

    Raises:
        UnsupportedCounterError: if nothing is registered for `counter`.

    Example:
        >>> counter_type(np.int8) is I8Counter
        True
        >>> counter_type(complex)
        Traceback (most recent call last):
            ...
        numerate.counter.UnsupportedCounterError: no counter registered for <class 'complex'>
    """
    if isinstance(counter, type) and issubclass(counter, Counter):
        if not hasattr(counter, "numeric_type"):
            raise UnsupportedCounterError(f"{counter.__name__} has no numeric type")
        return counter
    try:
        return _registry[counter]
    except (KeyError, TypeError):
        raise UnsupportedCounterError(
            f"no counter registered for {counter!r}"
        ) from None


def supported_types() -> tuple[type[tp.Any], ...]:
    return tuple(_registry)


I8Counter = register_counter(np.int8, name="I8")
I16Counter = register_counter(np.int16, name="I16")
I32Counter = register_counter(np.int32, name="I32")
I64Counter = register_counter(np.int64, name="I64")
IsizeCounter = register_counter(np.intp, name="Isize")
U8Counter = register_counter(np.uint8, name="U8")
U16Counter = register_counter(np.uint16, name="U16")
U32Counter = register_counter(np.uint32, name="U32")
U64Counter = register_counter(np.uint64, name="U64")
UsizeCounter = register_counter(np.uintp, name="Usize")
F16Counter = register_counter(np.float16, name="F16")
F32Counter = register_counter(np.float32, name="F32")
F64Counter = register_counter(np.float64, name="F64")
IntCounter = register_counter(int)
FloatCounter = register_counter(float)
DecimalCounter = register_counter(Decimal)
FractionCounter = register_counter(Fraction)
