"""
Sentinels for the `default` argument of single-item adapter calls.

`nth`, `next_back` and `nth_back` return `Exhausted` when nothing is left,
or raise StopIteration when given `NoDefault`. An adapter used as another
adapter's producer reports its own end with `Exhausted`, which the outer
adapter reads as exhaustion.
"""

import enum
from typing import Literal


class Default(enum.Enum):
    Exhausted = enum.auto()
    NoDefault = enum.auto()


Exhausted: Literal[Default.Exhausted] = Default.Exhausted
NoDefault: Literal[Default.NoDefault] = Default.NoDefault
