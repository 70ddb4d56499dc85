from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING

from ...types import Chunk, Token
from ..protocols import Segmenter
from .sequential import SequentialDispatcher

if TYPE_CHECKING:
    from ...dictionary import Dictionary

logger = logging.getLogger(__name__)

__all__ = ["ParallelDispatcher"]


class ParallelDispatcher:
    """Segment chunks on a thread pool, one task per chunk.

    Each task writes into the slot of its chunk position, so the output
    order never depends on completion order. The pool lives only for the
    duration of a call.

    Args:
        max_workers: Pool size. None lets ThreadPoolExecutor decide.
    """

    name = "parallel"

    def __init__(self, max_workers: int | None = None) -> None:
        self.max_workers = max_workers

    def dispatch(
        self, segmenter: Segmenter, dictionary: Dictionary, chunks: list[Chunk]
    ) -> list[Token]:
        if len(chunks) < 2:
            return SequentialDispatcher().dispatch(segmenter, dictionary, chunks)

        results: list[list[Token] | None] = [None] * len(chunks)
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_slot = {
                executor.submit(
                    segmenter.segment,
                    dictionary,
                    chunk.text,
                    offset=chunk.char_start,
                    chunk_idx=chunk.index,
                ): slot
                for slot, chunk in enumerate(chunks)
            }
            for future in as_completed(future_to_slot):
                results[future_to_slot[future]] = future.result()

        logger.debug("Joined %d chunk tasks", len(chunks))
        tokens: list[Token] = []
        for chunk_tokens in results:
            assert chunk_tokens is not None
            tokens.extend(chunk_tokens)
        return tokens
