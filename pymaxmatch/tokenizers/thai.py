"""Dictionary based tokenizer for text without word delimiters."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from ..dictionary import Dictionary
from ..runtime.tracing import trace_timing
from ..stages.chunkers.whitespace import WhitespaceChunker
from ..stages.dispatchers import dispatcher_for
from ..stages.protocols import Chunker, Dispatcher, Segmenter
from ..stages.segmenters.maximal_matching import MaximalMatchingSegmenter
from ..tokenizer_config import TokenizerConfig
from ..types import Token, TokenizeResult, Trace

logger = logging.getLogger(__name__)


class ThaiTokenizer:
    """Maximum matching tokenizer backed by a word dictionary.

    Text is split into whitespace-free chunks, each chunk is segmented
    against the dictionary, and the tokens are joined in chunk order. The
    quality of the result depends on the quality of the dictionary.

    Args:
        dictionary_source: Path to a word list (one word per line), an
            iterable of words, or a prebuilt Dictionary
        config: Execution configuration; the strategy never changes output

    Raises:
        DictionaryLoadError: If a word list path cannot be read or decoded
    """

    def __init__(
        self,
        dictionary_source: str | os.PathLike[str] | Iterable[str] | Dictionary,
        config: TokenizerConfig | None = None,
        *,
        chunker: Chunker | None = None,
        segmenter: Segmenter | None = None,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        self.config = config or TokenizerConfig()
        self.dictionary = Dictionary.load(dictionary_source)
        self.chunker = chunker or WhitespaceChunker()
        self.segmenter = segmenter or MaximalMatchingSegmenter()
        self.dispatcher = dispatcher or dispatcher_for(
            self.config.strategy, max_workers=self.config.max_workers
        )
        self._closed = False

    @classmethod
    def from_words(
        cls, words: Iterable[str], config: TokenizerConfig | None = None
    ) -> ThaiTokenizer:
        return cls(Dictionary.from_words(words), config)

    @classmethod
    def from_hub(
        cls,
        repo_id: str,
        filename: str | None = None,
        config: TokenizerConfig | None = None,
        **kwargs,
    ) -> ThaiTokenizer:
        if filename is not None:
            kwargs["filename"] = filename
        return cls(Dictionary.from_hub(repo_id, **kwargs), config)

    def __enter__(self) -> ThaiTokenizer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        # Dispatchers create their pools per call, so there is nothing to free.
        self._closed = True

    def analyze(self, text: str) -> TokenizeResult:
        trace = Trace() if self.config.return_trace else None

        with trace_timing(trace, "chunk", "whitespace") as details:
            logger.debug("Splitting text of %d chars", len(text))
            chunks = self.chunker.split(text)
            details["chunks"] = len(chunks)

        with trace_timing(
            trace, "dispatch", self.dispatcher.name, chunks=len(chunks)
        ) as details:
            logger.debug(
                "Segmenting %d chunks with %s dispatcher",
                len(chunks),
                self.dispatcher.name,
            )
            tokens = self.dispatcher.dispatch(self.segmenter, self.dictionary, chunks)
            details["tokens"] = len(tokens)

        if trace is not None:
            unknown = sum(1 for token in tokens if token.kind == "unknown")
            if unknown:
                trace.warnings.append(f"{unknown} unknown tokens")

        return TokenizeResult(
            tokens=tokens,
            chunks=chunks,
            trace=trace,
        )

    def tokenize_spans(self, text: str) -> list[Token]:
        return self.analyze(text).tokens

    def tokenize(self, text: str) -> list[str]:
        return self.analyze(text).words

    def __call__(self, text: str) -> list[str]:
        return self.tokenize(text)
