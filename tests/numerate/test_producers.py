import copy
from operator import length_hint

import pytest

from numerate.producers import SeqProducer, into_producer
from numerate.wtyping import (
    DoubleEndedProducer,
    SupportsCount,
    SupportsFold,
    SupportsNth,
    SupportsSizeHint,
)


def test_forward_and_backward_meet():
    p = SeqProducer([1, 2, 3, 4])
    assert next(p) == 1
    assert p.next_back() == 4
    assert len(p) == 2
    assert next(p) == 2
    assert p.next_back() == 3
    assert len(p) == 0
    with pytest.raises(StopIteration):
        _ = next(p)
    with pytest.raises(StopIteration):
        _ = p.next_back()


def test_nth_and_nth_back():
    p = SeqProducer(range(10))
    assert p.nth(2) == 2
    assert p.nth_back(2) == 7
    assert len(p) == 4
    with pytest.raises(StopIteration):
        _ = p.nth(4)
    assert len(p) == 0


def test_nth_back_past_front():
    p = SeqProducer("abc")
    with pytest.raises(StopIteration):
        _ = p.nth_back(3)
    with pytest.raises(StopIteration):
        _ = next(p)


def test_negative_skip():
    with pytest.raises(ValueError, match="non-negative"):
        _ = SeqProducer("abc").nth(-1)
    with pytest.raises(ValueError, match="non-negative"):
        _ = SeqProducer("abc").nth_back(-1)


def test_size_reporting():
    p = SeqProducer(range(5))
    assert length_hint(p) == 5
    assert p.size_hint() == (5, 5)
    _ = next(p)
    assert p.size_hint() == (4, 4)


def test_count_drains():
    p = SeqProducer("some")
    _ = next(p)
    assert p.count() == 3
    assert len(p) == 0


def test_fold_and_rfold():
    p = SeqProducer(range(5))
    _ = next(p)
    assert p.fold([], lambda acc, x: [*acc, x]) == [1, 2, 3, 4]
    assert len(p) == 0

    p = SeqProducer(range(5))
    _ = p.next_back()
    assert p.rfold([], lambda acc, x: [*acc, x]) == [3, 2, 1, 0]
    assert len(p) == 0


def test_copy_is_independent():
    p = SeqProducer("abc")
    _ = next(p)
    q = copy.copy(p)
    assert list(q) == ["b", "c"]
    assert list(p) == ["b", "c"]


def test_capabilities():
    p = SeqProducer(())
    assert isinstance(p, DoubleEndedProducer)
    assert isinstance(p, SupportsNth)
    assert isinstance(p, SupportsCount)
    assert isinstance(p, SupportsFold)
    assert isinstance(p, SupportsSizeHint)
    assert not isinstance(iter([]), DoubleEndedProducer)
    assert not isinstance((x for x in ()), DoubleEndedProducer)


def test_into_producer():
    for seq in ("abc", [1, 2], (1,), range(3)):
        assert isinstance(into_producer(seq), SeqProducer)

    p = SeqProducer("ab")
    assert into_producer(p) is p

    gen = (x for x in range(3))
    assert into_producer(gen) is gen
    assert not isinstance(into_producer({1: 2}), SeqProducer)
