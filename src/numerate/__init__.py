import logging

from numerate.adapter import DoubleEndedEnumerate, Enumerate, Numbered
from numerate.chain import (
    Iter,
    enumerate_as,
    enumerate_decimal,
    enumerate_f16,
    enumerate_f32,
    enumerate_f64,
    enumerate_float,
    enumerate_fraction,
    enumerate_i8,
    enumerate_i16,
    enumerate_i32,
    enumerate_i64,
    enumerate_int,
    enumerate_isize,
    enumerate_number,
    enumerate_u8,
    enumerate_u16,
    enumerate_u32,
    enumerate_u64,
    enumerate_usize,
)
from numerate.counter import (
    Counter,
    UnsupportedCounterError,
    counter_type,
    register_counter,
    supported_types,
)
from numerate.defaults import Default, Exhausted, NoDefault
from numerate.producers import SeqProducer, into_producer
from numerate.wtyping import DoubleEndedProducer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Counter",
    "Default",
    "DoubleEndedEnumerate",
    "DoubleEndedProducer",
    "Enumerate",
    "Exhausted",
    "Iter",
    "NoDefault",
    "Numbered",
    "SeqProducer",
    "UnsupportedCounterError",
    "counter_type",
    "enumerate_as",
    "enumerate_decimal",
    "enumerate_f16",
    "enumerate_f32",
    "enumerate_f64",
    "enumerate_float",
    "enumerate_fraction",
    "enumerate_i8",
    "enumerate_i16",
    "enumerate_i32",
    "enumerate_i64",
    "enumerate_int",
    "enumerate_isize",
    "enumerate_number",
    "enumerate_u8",
    "enumerate_u16",
    "enumerate_u32",
    "enumerate_u64",
    "enumerate_usize",
    "into_producer",
    "register_counter",
    "supported_types",
]
