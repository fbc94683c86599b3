"""
Tests for cursors and cursor conversion.
"""

from collections import OrderedDict, deque

import pytest

from iterflat import (
    DoubleEndedProducer,
    IterCursor,
    NotDoubleEndedError,
    ReversibleCursor,
    SequenceCursor,
    flatten,
    into_cursor,
    into_double_ended,
)


class TestIterCursor:
    def test_pulls_in_order(self, value_of):
        cursor = IterCursor([1, 2])
        assert value_of(cursor.pull_front()) == 1
        assert value_of(cursor.pull_front()) == 2
        assert value_of(cursor.pull_front()) is None

    def test_fused_after_exhaustion(self, value_of):
        class Resumable:
            def __init__(self):
                self.ready = False

            def __iter__(self):
                return self

            def __next__(self):
                if not self.ready:
                    raise StopIteration
                return "late"

        source = Resumable()
        cursor = IterCursor(source)
        assert value_of(cursor.pull_front()) is None
        source.ready = True
        assert value_of(cursor.pull_front()) is None

    def test_is_not_double_ended(self):
        assert not isinstance(IterCursor([]), DoubleEndedProducer)


class TestSequenceCursor:
    def test_ends_meet(self, value_of):
        cursor = SequenceCursor("abc")
        assert value_of(cursor.pull_back()) == "c"
        assert value_of(cursor.pull_front()) == "a"
        assert len(cursor) == 1
        assert value_of(cursor.pull_back()) == "b"
        assert value_of(cursor.pull_front()) is None
        assert value_of(cursor.pull_back()) is None
        assert len(cursor) == 0

    def test_range_is_not_materialized(self, value_of):
        cursor = SequenceCursor(range(10**18))
        assert value_of(cursor.pull_back()) == 10**18 - 1
        assert value_of(cursor.pull_front()) == 0


class TestReversibleCursor:
    def test_dict_both_ends(self, value_of):
        cursor = ReversibleCursor({"a": 1, "b": 2, "c": 3})
        assert value_of(cursor.pull_front()) == "a"
        assert value_of(cursor.pull_back()) == "c"
        assert value_of(cursor.pull_front()) == "b"
        assert value_of(cursor.pull_back()) is None
        assert value_of(cursor.pull_front()) is None

    def test_dict_items_view(self):
        cursor = ReversibleCursor({"a": 1, "b": 2}.items())
        assert cursor.collect_back() == [("b", 2), ("a", 1)]


class TestIntoCursor:
    def test_producer_passes_through(self):
        inner = SequenceCursor([1])
        assert into_cursor(inner) is inner

    @pytest.mark.parametrize("source", [[1], (1,), range(1), "x", deque([1])])
    def test_sequences(self, source):
        assert isinstance(into_cursor(source), SequenceCursor)

    @pytest.mark.parametrize("source", [{"k": 1}, {"k": 1}.keys(), OrderedDict(k=1)])
    def test_sized_reversibles(self, source):
        assert isinstance(into_cursor(source), ReversibleCursor)

    @pytest.mark.parametrize("source", [iter([1]), {1}, (x for x in [1])])
    def test_forward_only(self, source):
        assert isinstance(into_cursor(source), IterCursor)

    def test_adapter_passes_through(self):
        adapter = flatten([[1]])
        assert into_cursor(adapter) is adapter

    def test_not_iterable(self):
        with pytest.raises(TypeError):
            into_cursor(42)


class TestIntoDoubleEnded:
    def test_sequence(self):
        assert into_double_ended([1, 2]).collect_back() == [2, 1]

    def test_set_is_rejected(self):
        with pytest.raises(NotDoubleEndedError) as exc_info:
            into_double_ended({1, 2})
        assert exc_info.value.type_name == "set"

    def test_forward_adapter_is_rejected(self):
        with pytest.raises(NotDoubleEndedError):
            into_double_ended(flatten(iter([[1]])))
