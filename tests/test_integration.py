"""
End-to-end pipelines across sources, transforms, collections and terminals.
"""

import operator

from lazyseq import ChainedList, Ints, Pair, Sequence, chars


class TestScenarios:
    def test_filter_then_map(self):
        result = Sequence.of(1, 2, 3, 4, 5, 6, 7, 8, 9).filter(lambda x: x % 2 == 0).map(str).to_list()
        assert result == ["2", "4", "6", "8"]

    def test_fibonacci(self):
        fibonacci = (Sequence.recurse(Pair.of(0, 1), lambda p: p.shift_left(p.left + p.right))
                     .map(lambda p: p.left)
                     .until(55))
        assert fibonacci.to_list() == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]
        assert fibonacci.to_list() == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

    def test_factorial(self):
        assert Sequence.longs().limit(13).reduce(operator.mul, 1) == 6227020800

    def test_chained_list(self):
        chained = ChainedList.concat([[1, 2], [3, 4, 5], [6]])
        assert chained[3] == 4
        assert len(chained) == 6

        empty = ChainedList.concat([])
        empty.insert(0, 0)
        assert len(empty) == 1
        assert empty[0] == 0

    def test_tail_limit(self):
        assert Ints.range(1, 10).limit_tail(3).to_list() == [8, 9, 10]

    def test_snake_case_round_trip(self):
        snake = chars("Hello Lexicon").map(lambda c: '_' if c == ' ' else c).map(str.lower).as_string()
        assert snake == "hello_lexicon"

        title = (chars(snake)
                 .map_back(lambda p, c: c.upper() if p is None or p == '_' else c)
                 .map(lambda c: ' ' if c == '_' else c)
                 .as_string())
        assert title == "Hello Lexicon"


class TestPipelines:
    def test_word_frequencies(self):
        words = "the quick brown fox jumps over the lazy dog the end".split()
        counts = {}
        Sequence.from_iterable(words).for_each(lambda w: counts.__setitem__(w, counts.get(w, 0) + 1))
        top = (Sequence.from_iterable(counts.items())
               .to_entries()
               .filter(lambda word, count: count > 1)
               .to_map())
        assert top == {'the': 3}

    def test_primes_by_trial_division(self):
        def divisors(n):
            return Ints.from_iterable(range(2, int(n ** 0.5) + 1)).filter(lambda d: n % d == 0)

        primes = Ints.range(2, 50).filter(lambda n: divisors(n).is_empty()).to_list()
        assert primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47]

    def test_running_differences(self):
        deltas = Sequence.of(1, 4, 9, 16, 25).pair().map(lambda p: p.right - p.left).to_list()
        assert deltas == [3, 5, 7, 9]

    def test_chained_list_backed_sequence(self):
        head, tail = [1, 2], [3]
        seq = Sequence.from_list(head).append(tail)
        tail.append(4)
        assert seq.map(lambda x: x * 10).to_list() == [10, 20, 30, 40]
        assert seq.size() == 4
        assert seq.last() == 4
