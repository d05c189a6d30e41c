"""Tests for FixedTuple."""
import pytest

from tagbox.containers import FixedTuple
from tagbox.internals.errors import AllocationFailure, ReleasedContainerError, ValueKindError
from tagbox.values import IntValue


def test_construct_copies_references(demo_values):
    tup = FixedTuple("mytuple", demo_values)
    assert tup.name == "mytuple"
    assert tup.length == 3
    assert len(tup) == 3
    assert all(a is b for a, b in zip(tup, demo_values))


def test_construct_is_a_shallow_copy(demo_values):
    tup = FixedTuple("t", demo_values)
    demo_values.append(IntValue(7))
    demo_values[0] = None
    assert tup.length == 3
    assert tup.entry(0) == IntValue(42)


def test_construct_from_iterator(demo_values):
    tup = FixedTuple("t", iter(demo_values))
    assert list(tup) == demo_values


def test_empty_tuple():
    tup = FixedTuple("empty", [])
    assert tup.length == 0
    assert list(tup) == []


def test_none_entries_are_kept():
    tup = FixedTuple("t", [None, IntValue(1)])
    assert tup.entry(0) is None


@pytest.mark.parametrize("index", [-1, 3])
def test_entry_out_of_range(demo_values, index):
    tup = FixedTuple("t", demo_values)
    with pytest.raises(IndexError):
        tup.entry(index)


def test_release_valid_tuple(demo_values):
    tup = FixedTuple("t", demo_values)
    tup.release()
    assert tup.released
    # values stay with the caller
    assert demo_values[0] == IntValue(42)


def test_use_after_release(demo_values):
    tup = FixedTuple("t", demo_values)
    tup.release()
    with pytest.raises(ReleasedContainerError) as info:
        tup.length
    assert info.value.code == "RE2022"
    with pytest.raises(ReleasedContainerError):
        list(tup)


def test_double_release(demo_values):
    tup = FixedTuple("t", demo_values)
    tup.release()
    with pytest.raises(ReleasedContainerError) as info:
        tup.release()
    assert info.value.code == "RE2023"
    assert "tuple released twice" in str(info.value)


def test_context_manager_releases(demo_values):
    with FixedTuple("t", demo_values) as tup:
        assert tup.length == 3
    assert tup.released


def test_context_manager_after_explicit_release(demo_values):
    with FixedTuple("t", demo_values) as tup:
        tup.release()
    assert tup.released


def test_allocation_failure(demo_values, failing_allocator):
    with pytest.raises(AllocationFailure) as info:
        FixedTuple("t", demo_values)
    assert info.value.code == "RE2021"
    assert info.value.site == "tuple buffer"


def test_repr(demo_values):
    tup = FixedTuple("mytuple", demo_values)
    assert repr(tup) == "FixedTuple('mytuple', length=3)"
    tup.release()
    assert repr(tup) == "FixedTuple('mytuple', <released>)"


def test_construct_factory(demo_values):
    tup = FixedTuple.construct("mytuple", demo_values)
    assert isinstance(tup, FixedTuple)
    assert list(tup) == demo_values


def test_construct_reports_frame_failure(demo_values, monkeypatch):
    def _no_memory(self, name, elements):
        raise MemoryError

    monkeypatch.setattr(FixedTuple, "__init__", _no_memory)
    with pytest.raises(AllocationFailure) as info:
        FixedTuple.construct("t", demo_values)
    assert info.value.site == "tuple frame"


def test_construct_rejects_raw_payloads(demo_values):
    with pytest.raises(ValueKindError) as info:
        FixedTuple("t", demo_values + [42])
    assert info.value.code == "CE2006"
    assert "got int" in str(info.value)
