import pytest

import lazyseq as ls
from lazyseq import ExhaustedError, UnsupportedOperationError

from conftest import Recorder, drain


class TestMappedSeq:
    def test_order_and_length(self):
        items = [1, 2, 3, 4]
        assert drain(ls.map(ls.array_seq(items), lambda x: x * 10)) == [10, 20, 30, 40]

    def test_lazy(self):
        square = Recorder(lambda x: x * x)
        seq = ls.map(ls.array_seq([1, 2, 3]), square)
        assert square.calls == []
        assert seq.has_more()
        assert square.calls == []
        assert seq.next() == 1
        assert square.calls == [1]

    def test_transform_once_per_element(self):
        ident = Recorder(lambda x: x)
        seq = ls.map(ls.array_seq(["a", "b"]), ident)
        for _ in range(3):
            seq.has_more()
        drain(seq)
        assert ident.calls == ["a", "b"]

    def test_exhaustion(self):
        seq = ls.map(ls.empty_seq(), str)
        assert not seq.has_more()
        with pytest.raises(ExhaustedError):
            seq.next()
        with pytest.raises(ExhaustedError):
            seq.next()

    def test_remove_unsupported(self):
        seq = ls.map(ls.array_seq([1]), str)
        seq.next()
        with pytest.raises(UnsupportedOperationError):
            seq.remove()

    def test_returns_seq(self):
        assert isinstance(ls.map(ls.array_seq([]), str), ls.MappedSeq)


class TestMappedSource:
    def test_restartable(self):
        src = ls.map(ls.array_source([1, 2]), lambda x: x + 1)
        assert isinstance(src, ls.Source)
        assert ls.collect(src) == [2, 3]
        assert ls.collect(src) == [2, 3]

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            ls.map([1, 2], str)

    def test_type_error_names_caller(self):
        with pytest.raises(TypeError, match=r"map\(\): expected Seq or Source, got list"):
            ls.map([1], str)
        with pytest.raises(TypeError, match=r"collect\(\): expected Seq or Source, got tuple"):
            ls.collect((1,))
