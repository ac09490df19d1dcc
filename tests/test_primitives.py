"""
Tests for the primitive sequences (Ints, Longs, Doubles, Chars) and EntrySequence.
"""

from decimal import Decimal

import numpy as np
import pytest

from lazyseq.errors import UnsupportedOperationError
from lazyseq.sequence.entries import EntrySequence
from lazyseq.sequence.primitives import Chars, Doubles, IntegerSequence, Ints, Longs, chars
from lazyseq.sequence.sequence import Sequence
from lazyseq.util.pair import Pair


class TestInts:
    def test_positive_negative(self):
        assert Ints.positive().limit(3).to_list() == [1, 2, 3]
        assert Ints.negative().limit(3).to_list() == [-1, -2, -3]

    def test_range(self):
        assert Ints.range(1, 4).to_list() == [1, 2, 3, 4]
        assert Ints.range(3, 1).to_list() == [3, 2, 1]

    def test_combinators_stay_specialised(self):
        seq = Ints.positive().map(lambda i: i * i).skip(3).limit(5)
        assert isinstance(seq, Ints)
        assert seq.to_list() == [16, 25, 36, 49, 64]

    def test_type_changing_combinators_box(self):
        seq = Ints.of(1, 2, 3)
        assert type(seq.pair()) is Sequence
        assert type(seq.interleave([4])) is Sequence
        assert type(seq.to_sequence()) is Sequence

    def test_typed_iterator(self):
        it = Ints.of(1, 2).iterator()
        assert it.next_int() == 1
        assert it.next_int() == 2
        assert not it.has_next()

    def test_to_array(self):
        array = Ints.range(1, 3).to_array()
        assert array.dtype == np.int32
        assert array.tolist() == [1, 2, 3]
        with pytest.raises(UnsupportedOperationError):
            Ints.positive().to_array()

    def test_from_numpy_array(self):
        assert Ints.from_array(np.array([4, 5, 6]), 1).to_list() == [5, 6]

    def test_aggregates(self):
        assert Ints.range(1, 4).sum() == 10
        assert Ints.of(3, 1, 2).min() == 1
        assert Ints.of(3, 1, 2).max() == 3
        assert Ints.of().max(default=0) == 0
        assert Ints.of().sum() == 0
        with pytest.raises(UnsupportedOperationError):
            Ints.positive().sum()

    def test_conversion_from_boxed(self):
        assert Sequence.of('1', '2').to_ints(int).sum() == 3
        assert isinstance(Sequence.of(1).to_ints(), Ints)

    def test_rejects_floats(self):
        with pytest.raises(TypeError):
            Ints.of(1.5).to_list()

    def test_rejects_strings_and_decimals(self):
        with pytest.raises(TypeError):
            Ints.range(1, 3).map(lambda i: str(i) * 2).to_list()
        with pytest.raises(TypeError):
            Ints.of(Decimal('1.5')).to_list()
        with pytest.raises(TypeError):
            Ints.of('7').first()
        assert Ints.of(np.int16(7), True).to_list() == [7, 1]

    def test_typed_list_iterator(self):
        it = Ints.of(1, 2, 3).list_iterator(1)
        assert it.next_index() == 1
        assert it.next_int() == 2
        assert it.next_int() == 3
        assert not it.has_next()
        with pytest.raises(UnsupportedOperationError):
            it.set_int(5)
        with pytest.raises(UnsupportedOperationError):
            it.previous_int()


class TestLongs:
    def test_negative_step(self):
        assert Longs.negative().step(2).skip(3).limit(5).to_list() == [-7, -9, -11, -13, -15]

    def test_to_array(self):
        array = Longs.of(2 ** 40, 1).to_array()
        assert array.dtype == np.int64
        assert array[0] == 2 ** 40

    def test_factorial(self):
        assert Sequence.longs().to_longs().limit(13).reduce(lambda a, b: a * b, 1) == 6227020800
        assert Longs.positive().iterator().next_long() == 1

    def test_not_an_ints_subtype(self):
        assert not isinstance(Longs.positive(), Ints)
        assert not isinstance(Ints.positive(), Longs)
        assert isinstance(Longs.range(1, 3), IntegerSequence)
        assert type(Longs.negative().limit(2)) is Longs
        assert Longs.range(3, 1).to_list() == [3, 2, 1]


class TestDoubles:
    def test_positive_negative(self):
        values = Doubles.positive().limit(2).to_list()
        assert values == [1.0, 2.0]
        assert all(isinstance(v, float) for v in values)
        assert Doubles.negative().first() == -1.0

    def test_range(self):
        assert Doubles.range(0.0, 1.0, 0.5).to_list() == [0.0, 0.5, 1.0]
        with pytest.raises(ValueError):
            Doubles.range(0.0, 1.0, 0)

    def test_range_keeps_end_despite_rounding(self):
        values = Doubles.range(0.0, 0.3, 0.1).to_list()
        assert values == pytest.approx([0.0, 0.1, 0.2, 0.3])
        assert Doubles.range(1.0, 0.0, -0.25).to_list() == [1.0, 0.75, 0.5, 0.25, 0.0]
        assert Doubles.range(0.0, 0.25, 0.1).to_list() == pytest.approx([0.0, 0.1, 0.2])
        assert Doubles.range(1.0, 0.0, 0.5).to_list() == []

    def test_rejects_strings(self):
        with pytest.raises(TypeError):
            Doubles.of('1.5').to_list()
        with pytest.raises(TypeError):
            Doubles.of(Decimal('2')).to_list()
        assert Doubles.of(np.float32(0.5), np.int8(2)).to_list() == [0.5, 2.0]

    def test_ints_are_widened(self):
        it = Doubles.of(1, 2).iterator()
        value = it.next_double()
        assert value == 1.0 and isinstance(value, float)

    def test_to_array(self):
        array = Doubles.of(1, 2.5).to_array()
        assert array.dtype == np.float64
        assert array.tolist() == [1.0, 2.5]


class TestChars:
    def test_from_string(self):
        assert Chars.from_string("abc").to_list() == ['a', 'b', 'c']
        assert chars("abc").to_upper().as_string() == "ABC"
        assert str(chars("AbC").to_lower()) == "abc"

    def test_range(self):
        assert Chars.range('a', 'e').as_string() == "abcde"
        assert Chars.range('c', 'a').as_string() == "cba"

    def test_code_points_accepted(self):
        assert Sequence.of(104, 105).to_chars().as_string() == "hi"

    def test_typed_iterator(self):
        assert chars("x").iterator().next_char() == 'x'
        assert chars("xy").list_iterator(1).next_char() == 'y'

    def test_rejects_strings(self):
        with pytest.raises(TypeError):
            Chars.of('ab').to_list()

    def test_to_array(self):
        array = chars("hi").to_array()
        assert array.dtype == np.uint32
        assert array.tolist() == [104, 105]

    def test_map_back_capitalises_words(self):
        result = (chars("hello_lexicon")
                  .map_back(lambda p, c: c.upper() if p is None or p == '_' else c)
                  .map(lambda c: ' ' if c == '_' else c)
                  .as_string())
        assert result == "Hello Lexicon"


class TestEntrySequence:
    def test_from_map(self):
        result = (EntrySequence.from_map({"a": 1, "b": 2, "c": 3})
                  .filter(lambda k, v: v != 2)
                  .map(lambda k, v: (k.upper(), v * 10))
                  .to_map())
        assert result == {'A': 10, 'C': 30}

    def test_reads_map_at_traversal(self):
        mapping = {'a': 1}
        seq = EntrySequence.from_map(mapping)
        mapping['b'] = 2
        assert seq.keys().to_list() == ['a', 'b']
        assert seq.values().to_list() == [1, 2]

    def test_of(self):
        seq = EntrySequence.of(('a', 1), Pair.of('b', 2))
        assert seq.to_list() == [Pair.of('a', 1), Pair.of('b', 2)]
        assert seq.to_map() == {'a': 1, 'b': 2}

    def test_key_value_combinators(self):
        seq = EntrySequence.from_map({'a': 1, 'bb': 2})
        assert seq.filter_keys(lambda k: len(k) > 1).to_map() == {'bb': 2}
        assert seq.filter_values(lambda v: v < 2).to_map() == {'a': 1}
        assert seq.map_keys(str.upper).to_map() == {'A': 1, 'BB': 2}
        assert seq.map_values(lambda v: -v).to_map() == {'a': -1, 'bb': -2}

    def test_map_stays_entries(self):
        seq = EntrySequence.from_map({'a': 1}).map(lambda k, v: Pair.of(v, k))
        assert isinstance(seq, EntrySequence)
        assert seq.first() == Pair.of(1, 'a')

    def test_to_entries(self):
        seq = Sequence.of(('a', 1)).to_entries()
        assert isinstance(seq, EntrySequence)
        assert seq.first() == Pair.of('a', 1)
        assert isinstance(seq.first(), Pair)
