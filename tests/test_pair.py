"""
Tests for Pair.
"""

import pickle

import pytest

from lazyseq.errors import UnsupportedOperationError
from lazyseq.util.pair import Pair


class Entry:
    def __init__(self, key, value):
        self.key = key
        self.value = value


class TestPairAccess:
    def test_accessors(self):
        p = Pair.of(1, 'a')
        assert p.left == p.key == 1
        assert p.right == p.value == 'a'

    def test_from_entry(self):
        assert Pair.from_entry((1, 2)) == Pair.of(1, 2)
        assert Pair.from_entry(Entry('k', 'v')) == Pair.of('k', 'v')
        p = Pair.of(1, 2)
        assert Pair.from_entry(p) == p
        assert Pair.from_entry(next(iter({'a': 1}.items()))) == Pair.of('a', 1)
        with pytest.raises(TypeError):
            Pair.from_entry(5)

    def test_unary(self):
        assert Pair.unary(3) == Pair.of(3, 3)

    def test_immutable(self):
        p = Pair.of(1, 2)
        with pytest.raises(UnsupportedOperationError):
            p.set_value(3)
        with pytest.raises(UnsupportedOperationError):
            p._left = 5
        assert p == Pair.of(1, 2)


class TestPairDerivation:
    def setup_method(self):
        self.pair = Pair.of(1, 2)

    def test_swap_and_with(self):
        assert self.pair.swap() == Pair.of(2, 1)
        assert self.pair.with_left(0) == Pair.of(0, 2)
        assert self.pair.with_right(0) == Pair.of(1, 0)
        assert self.pair == Pair.of(1, 2)

    def test_shift(self):
        assert self.pair.shift_left(3) == Pair.of(2, 3)
        assert self.pair.shift_right(3) == Pair.of(3, 1)

    def test_map_and_apply(self):
        assert self.pair.map(str, lambda r: r * 10) == Pair.of('1', 20)
        assert self.pair.map_pair(lambda l, r: Pair.of(r, l + r)) == Pair.of(2, 3)
        assert self.pair.apply(lambda l, r: l + r) == 3

    def test_predicates(self):
        assert self.pair.test(lambda l: l == 1, lambda r: r == 2)
        assert not self.pair.test(lambda l: l == 1, lambda r: r == 3)
        assert self.pair.test_pair(lambda l, r: l < r)

    def test_put_into(self):
        mapping = {}
        Pair.of('a', 1).put_into(mapping)
        assert mapping == {'a': 1}


class TestPairProtocols:
    def test_iteration(self):
        p = Pair.of(1, 2)
        assert list(p) == [1, 2]
        assert len(p) == 2
        it = p.iterator()
        it.next()
        it.next()
        assert not it.has_next()

    def test_equality_with_entries(self):
        assert Pair.of('k', 'v') == Entry('k', 'v')
        assert Pair.of(1, 2) != (2, 1)
        assert Pair.of(1, 2) != [1, 2]

    def test_tuples_are_not_equal(self):
        assert Pair.of(1, 2) != (1, 2)
        assert (1, 2) != Pair.of(1, 2)
        assert len({Pair.of(1, 2), (1, 2)}) == 2
        assert Pair.from_entry((1, 2)) == Pair.of(1, 2)
        with pytest.raises(TypeError):
            Pair.of(1, 2) < (2, 0)

    def test_hash(self):
        assert hash(Pair.of(1, 2)) == 31 * hash(1) + hash(2)
        assert hash(Pair.of(None, None)) == 0
        assert len({Pair.of(1, 2), Pair.of(1, 2)}) == 1

    def test_ordering(self):
        pairs = [Pair.of(2, 'a'), Pair.of(1, 'b'), Pair.of(1, 'a')]
        assert sorted(pairs) == [Pair.of(1, 'a'), Pair.of(1, 'b'), Pair.of(2, 'a')]
        assert Pair.of(None, 1) < Pair.of(0, 1)
        assert Pair.of(1, 2) <= Pair.of(1, 2)

    def test_repr(self):
        assert repr(Pair.of("a", 1)) == '("a", 1)'
        assert str(Pair.of(1, None)) == '(1, None)'

    def test_pickle(self):
        p = Pair.of('a', (1, 2))
        assert pickle.loads(pickle.dumps(p)) == p
