import pytest

import lazyseq as ls
from lazyseq import ExhaustedError, IllegalStateError, UnsupportedOperationError

from conftest import drain


class TestEmpty:
    def test_has_no_elements(self):
        seq = ls.empty_seq()
        assert seq.has_more() is False
        with pytest.raises(ExhaustedError):
            seq.next()

    def test_repeated_next_keeps_failing(self):
        seq = ls.empty_seq()
        for _ in range(3):
            with pytest.raises(ExhaustedError):
                seq.next()
        assert not seq.has_more()

    def test_is_shared_constant(self):
        assert ls.empty_seq() is ls.EMPTY
        assert ls.empty_source().sequence() is ls.EMPTY

    def test_remove_unsupported(self):
        with pytest.raises(UnsupportedOperationError):
            ls.empty_seq().remove()


class TestSingle:
    def test_yields_once(self):
        seq = ls.single_seq("x")
        assert seq.has_more()
        assert seq.has_more()
        assert seq.next() == "x"
        assert not seq.has_more()

    def test_second_next_fails(self):
        seq = ls.single_seq(1)
        seq.next()
        with pytest.raises(ExhaustedError):
            seq.next()
        with pytest.raises(ExhaustedError):
            seq.next()

    def test_none_is_a_value(self):
        seq = ls.single_seq(None)
        assert seq.has_more()
        assert seq.next() is None
        assert not seq.has_more()

    def test_source_restarts(self):
        src = ls.single_source(7)
        assert ls.collect(src) == [7]
        assert ls.collect(src) == [7]


class TestArray:
    def test_in_order(self):
        assert drain(ls.array_seq([3, 1, 2])) == [3, 1, 2]

    def test_exhaustion(self):
        seq = ls.array_seq((1,))
        seq.next()
        with pytest.raises(ExhaustedError) as exc_info:
            seq.next()
        assert exc_info.value.sequence == "ArraySeq"
        with pytest.raises(ExhaustedError):
            seq.next()
        assert seq.has_more() is False

    def test_not_copied(self):
        items = [1, 2]
        seq = ls.array_seq(items)
        assert seq.next() == 1
        items.append(3)
        assert drain(seq) == [2, 3]

    def test_remove_from_list(self):
        items = [1, 2, 3, 4]
        seq = ls.array_seq(items)
        while seq.has_more():
            if seq.next() % 2 == 0:
                seq.remove()
        assert items == [1, 3]

    def test_remove_does_not_skip_next(self):
        items = ["a", "b", "c"]
        seq = ls.array_seq(items)
        assert seq.next() == "a"
        seq.remove()
        assert seq.next() == "b"
        assert items == ["b", "c"]

    def test_remove_before_next(self):
        with pytest.raises(IllegalStateError):
            ls.array_seq([1]).remove()

    def test_remove_twice(self):
        seq = ls.array_seq([1, 2])
        seq.next()
        seq.remove()
        with pytest.raises(IllegalStateError):
            seq.remove()

    def test_remove_from_tuple_unsupported(self):
        seq = ls.array_seq((1, 2))
        seq.next()
        with pytest.raises(UnsupportedOperationError) as exc_info:
            seq.remove()
        assert exc_info.value.operation == "remove"


class TestIter:
    def test_has_more_is_idempotent(self):
        seq = ls.iter_seq(x for x in [1, 2])
        assert seq.has_more() and seq.has_more()
        assert drain(seq) == [1, 2]
        assert not seq.has_more()

    def test_buffers_none(self):
        assert drain(ls.iter_seq([None, 0, None])) == [None, 0, None]

    def test_exhaustion(self):
        seq = ls.iter_seq([])
        with pytest.raises(ExhaustedError):
            seq.next()
        with pytest.raises(ExhaustedError):
            seq.next()
        assert seq.has_more() is False

    def test_exhaustion_after_elements(self):
        seq = ls.iter_seq(x for x in ["a"])
        assert seq.next() == "a"
        for _ in range(3):
            with pytest.raises(ExhaustedError):
                seq.next()
            assert seq.has_more() is False

    def test_source_over_reiterable(self):
        src = ls.iterable_source(range(3))
        assert ls.collect(src) == [0, 1, 2]
        assert ls.collect(src) == [0, 1, 2]


class TestProtocol:
    def test_seq_is_python_iterator(self):
        seq = ls.array_seq([1, 2, 3])
        assert iter(seq) is seq
        assert list(seq) == [1, 2, 3]
        assert list(seq) == []

    def test_source_is_python_iterable(self):
        src = ls.array_source([1, 2])
        assert list(src) == [1, 2]
        assert [x * 2 for x in src] == [2, 4]

    def test_try_next(self):
        from kungfu import Error, Ok

        seq = ls.single_seq(5)
        match seq.try_next():
            case Ok(value):
                assert value == 5
            case Error(_):
                pytest.fail("expected Ok")
        match seq.try_next():
            case Ok(_):
                pytest.fail("expected Error")
            case Error(err):
                assert isinstance(err, ExhaustedError)
