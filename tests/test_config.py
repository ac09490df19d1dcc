"""
Tests for library settings and logging.
"""

import logging

import pytest

import lazyseq
from lazyseq import config
from lazyseq.collection.chained_list import ChainedList
from lazyseq.sequence.list_sequence import ListSequence
from lazyseq.sequence.sequence import Sequence


@pytest.fixture(autouse=True)
def reset_settings():
    yield
    config.configure(random_seed=None, enable_logging=False)


class TestConfigure:
    def test_defaults(self):
        assert config.settings.random_seed is None
        assert config.settings.enable_logging is False

    def test_configure_returns_settings(self):
        settings = lazyseq.configure(random_seed=5)
        assert settings is config.settings
        assert settings.random_seed == 5

    def test_unknown_setting(self):
        with pytest.raises(ValueError):
            config.configure(colour="blue")

    def test_seeded_shuffle_is_reproducible(self):
        config.configure(random_seed=7)
        seq = Sequence.from_iterable(range(20)).shuffle()
        first = seq.to_list()
        assert seq.to_list() == first
        assert sorted(first) == list(range(20))

    def test_seeded_list_shuffle_is_reproducible(self):
        config.configure(random_seed=11)
        seq = ListSequence(list(range(20))).shuffle()
        assert list(seq.to_list()) == list(seq.to_list())

    def test_default_rng_uses_seed(self):
        config.configure(random_seed=3)
        assert config.default_rng().integers(1000) == config.default_rng().integers(1000)


class TestLogging:
    def test_buffering_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lazyseq"):
            Sequence.from_iterable(range(3)).reverse().to_list()
            Sequence.from_iterable(range(10)).limit_tail(2).to_list()
            Sequence.from_iterable((2, 1)).sorted().to_list()
        assert "Reverse buffered 3 elements" in caplog.text
        assert "Tail limit drained 10 elements, kept 2" in caplog.text
        assert "Sort buffered 2 elements" in caplog.text

    def test_bootstrap_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lazyseq"):
            ChainedList.concat([]).insert(0, 1)
        assert "Bootstrapping empty ChainedList" in caplog.text

    def test_nothing_logged_per_element(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="lazyseq"):
            Sequence.from_iterable(range(100)).map(str).filter(bool).to_list()
        assert caplog.records == []
