from __future__ import annotations

import logging

from ..runtime.tracing import trace_timing
from ..stages.chunkers.whitespace import WhitespaceChunker
from ..stages.protocols import Chunker
from ..tokenizer_config import TokenizerConfig
from ..types import Token, TokenizeResult, Trace

logger = logging.getLogger(__name__)


class WhitespaceTokenizer:
    """Tokenizer for languages that delimit words with whitespace.

    The chunk split is the whole tokenization; no dictionary is involved and
    the configured strategy has nothing to dispatch.
    """

    def __init__(
        self,
        config: TokenizerConfig | None = None,
        *,
        chunker: Chunker | None = None,
    ) -> None:
        self.config = config or TokenizerConfig()
        self.chunker = chunker or WhitespaceChunker()

    def __enter__(self) -> WhitespaceTokenizer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        return None

    def analyze(self, text: str) -> TokenizeResult:
        trace = Trace() if self.config.return_trace else None
        with trace_timing(trace, "chunk", "whitespace") as details:
            logger.debug("Splitting text of %d chars", len(text))
            chunks = self.chunker.split(text)
            details["chunks"] = len(chunks)
        tokens = [
            Token(
                text=chunk.text,
                char_start=chunk.char_start,
                char_end=chunk.char_end,
                kind="chunk",
                chunk_idx=chunk.index,
            )
            for chunk in chunks
        ]
        return TokenizeResult(
            tokens=tokens,
            chunks=chunks,
            trace=trace,
        )

    def tokenize_spans(self, text: str) -> list[Token]:
        return self.analyze(text).tokens

    def tokenize(self, text: str) -> list[str]:
        return [chunk.text for chunk in self.chunker.split(text)]

    def __call__(self, text: str) -> list[str]:
        return self.tokenize(text)
