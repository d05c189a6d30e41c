import pytest

from tagbox.values import CharValue, FloatValue, IntValue


@pytest.fixture
def demo_values():
    """The three values used by the end-to-end demo."""
    return [IntValue(42), FloatValue(3.14), CharValue("A")]


@pytest.fixture
def failing_allocator(monkeypatch):
    """Make every slot-buffer allocation raise MemoryError."""
    from tagbox.memory import heap

    def _fail(count):
        raise MemoryError

    monkeypatch.setattr(heap, "_new_slots", _fail)
