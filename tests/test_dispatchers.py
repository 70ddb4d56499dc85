import random
import threading
import time

import pytest

from pymaxmatch.dictionary import Dictionary
from pymaxmatch.stages.chunkers.whitespace import WhitespaceChunker
from pymaxmatch.stages.dispatchers import (
    ParallelDispatcher,
    SequentialDispatcher,
    dispatcher_for,
)
from pymaxmatch.stages.segmenters.maximal_matching import MaximalMatchingSegmenter
from pymaxmatch.types import Token


class ReverseDelaySegmenter:
    """Finishes later chunks first so completion order is reversed."""

    def __init__(self, n_chunks: int) -> None:
        self.n_chunks = n_chunks
        self.threads: set[int] = set()

    def segment(self, dictionary, text, *, offset=0, chunk_idx=0):
        _ = dictionary
        self.threads.add(threading.get_ident())
        time.sleep(0.005 * (self.n_chunks - chunk_idx))
        return [
            Token(
                text=text,
                char_start=offset,
                char_end=offset + len(text),
                kind="unknown",
                chunk_idx=chunk_idx,
            )
        ]


class TestWhitespaceChunker:
    def test_split_records_offsets(self):
        chunks = WhitespaceChunker().split("  hello \t world\n")
        assert [(c.index, c.text, c.char_start, c.char_end) for c in chunks] == [
            (0, "hello", 2, 7),
            (1, "world", 10, 15),
        ]

    def test_empty_and_whitespace_only(self):
        assert WhitespaceChunker().split("") == []
        assert WhitespaceChunker().split(" \n\t ") == []

    def test_unicode_whitespace_delimits(self):
        chunks = WhitespaceChunker().split("ภาษา　ไทย ง่าย")
        assert [c.text for c in chunks] == ["ภาษา", "ไทย", "ง่าย"]

    def test_information_separators_are_not_whitespace(self):
        chunks = WhitespaceChunker().split("a\x1fb \x1cc")
        assert [c.text for c in chunks] == ["a\x1fb", "\x1cc"]


class TestDispatcherFor:
    def test_known_strategies(self):
        assert isinstance(dispatcher_for("sequential"), SequentialDispatcher)
        dispatcher = dispatcher_for("parallel", max_workers=3)
        assert isinstance(dispatcher, ParallelDispatcher)
        assert dispatcher.max_workers == 3

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown strategy"):
            dispatcher_for("async")


class TestParallelDispatcher:
    def test_order_follows_chunks_not_completion(self):
        text = " ".join(f"w{i}" for i in range(8))
        chunks = WhitespaceChunker().split(text)
        segmenter = ReverseDelaySegmenter(len(chunks))

        tokens = ParallelDispatcher(max_workers=8).dispatch(
            segmenter, Dictionary.build([]), chunks
        )

        assert [t.text for t in tokens] == text.split()
        assert [t.chunk_idx for t in tokens] == list(range(8))

    def test_runs_on_worker_threads(self):
        chunks = WhitespaceChunker().split("a b c d")
        segmenter = ReverseDelaySegmenter(len(chunks))
        ParallelDispatcher(max_workers=4).dispatch(
            segmenter, Dictionary.build([]), chunks
        )
        assert threading.get_ident() not in segmenter.threads

    def test_single_chunk_stays_on_caller_thread(self):
        chunks = WhitespaceChunker().split("abc")
        segmenter = ReverseDelaySegmenter(len(chunks))
        tokens = ParallelDispatcher().dispatch(segmenter, Dictionary.build([]), chunks)
        assert [t.text for t in tokens] == ["abc"]
        assert segmenter.threads == {threading.get_ident()}

    def test_no_chunks(self):
        tokens = ParallelDispatcher().dispatch(
            MaximalMatchingSegmenter(), Dictionary.build(["a"]), []
        )
        assert tokens == []


@pytest.mark.parametrize("seed", range(5))
def test_strategies_are_equivalent(seed, th_words):
    rng = random.Random(seed)
    pieces = th_words + ["easy", "123", "จริงๆ", "!"]
    text = ""
    for _ in range(200):
        text += rng.choice(pieces)
        if rng.random() < 0.3:
            text += rng.choice([" ", "  ", "\n", "\t"])

    dictionary = Dictionary.build(th_words)
    chunks = WhitespaceChunker().split(text)
    segmenter = MaximalMatchingSegmenter()

    sequential = SequentialDispatcher().dispatch(segmenter, dictionary, chunks)
    parallel = ParallelDispatcher(max_workers=4).dispatch(segmenter, dictionary, chunks)

    assert sequential == parallel
    assert "".join(t.text for t in sequential) == "".join(text.split())
