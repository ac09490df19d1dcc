"""
lazyseq: Lazy, Composable Sequences for Python
==============================================

lazyseq builds pipelines of filter/map/limit/... over finite or infinite
ordered data. Pipelines are recipes: nothing runs until a terminal
operation pulls elements through a chain of single-pass iterators.

Core Components:
    - iterator: pull protocol, sources, transforms and chaining
    - collection: size-type lattice, ChainedList, list cursors and views
    - sequence: Sequence, ListSequence, primitive and entry sequences
    - util: Pair and argument checks

Usage:
    >>> import lazyseq
    >>> lazyseq.Sequence.of(1, 2, 3, 4).filter(lambda x: x % 2 == 0).map(str).to_list()
    ['2', '4']

    >>> lazyseq.Ints.range(1, 10).limit_tail(3).to_list()
    [8, 9, 10]
"""

__version__ = "1.0.0"
__author__ = "lazyseq developers"

from lazyseq.errors import NoSuchElementError, UnsupportedOperationError
from lazyseq.config import Settings, configure, settings
from lazyseq.collection.size_type import SizeType, size_type_of
from lazyseq.collection.chained_list import ChainedList
from lazyseq.collection.list_cursor import ListCursor, SubListView
from lazyseq.iterator.base import IteratorAdapter, ListIterator, PullIterator, as_pull, forward_only
from lazyseq.iterator.chaining import ChainedListIterator, ChainingIterable, ChainingIterator
from lazyseq.util.pair import Pair
from lazyseq.sequence.sequence import Sequence
from lazyseq.sequence.list_sequence import ListSequence
from lazyseq.sequence.primitives import Chars, Doubles, Ints, Longs, chars
from lazyseq.sequence.entries import EntrySequence
