from __future__ import annotations

from typing import TYPE_CHECKING

from ...types import Chunk, Token
from ..protocols import Segmenter

if TYPE_CHECKING:
    from ...dictionary import Dictionary

__all__ = ["SequentialDispatcher"]


class SequentialDispatcher:
    """Segment chunks one after another on the calling thread."""

    name = "sequential"

    def dispatch(
        self, segmenter: Segmenter, dictionary: Dictionary, chunks: list[Chunk]
    ) -> list[Token]:
        tokens: list[Token] = []
        for chunk in chunks:
            tokens.extend(
                segmenter.segment(
                    dictionary,
                    chunk.text,
                    offset=chunk.char_start,
                    chunk_idx=chunk.index,
                )
            )
        return tokens
