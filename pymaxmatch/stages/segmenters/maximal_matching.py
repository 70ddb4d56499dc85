"""Greedy maximum matching with minimal unknown runs.

At every position the longest dictionary word is taken. Where no word
starts, an unknown run begins and ends at the first later position where a
word does start (or at the end of the text). The result is not a globally
optimal segmentation; there is no backtracking into a chosen match.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...types import Token

if TYPE_CHECKING:
    from ...dictionary import Dictionary

__all__ = ["MaximalMatchingSegmenter", "maximal_matching"]


def maximal_matching(dictionary: Dictionary, text: str) -> list[tuple[int, int, bool]]:
    """Return ``(start, end, known)`` spans covering ``text``."""
    spans: list[tuple[int, int, bool]] = []
    n = len(text)
    pos = 0
    while pos < n:
        end = dictionary.longest_match_at(text, pos)
        if end is not None:
            spans.append((pos, end, True))
            pos = end
            continue

        q = pos + 1
        while q < n and dictionary.longest_match_at(text, q) is None:
            q += 1
        spans.append((pos, q, False))
        pos = q
    return spans


class MaximalMatchingSegmenter:
    def segment(
        self,
        dictionary: Dictionary,
        text: str,
        *,
        offset: int = 0,
        chunk_idx: int = 0,
    ) -> list[Token]:
        return [
            Token(
                text=text[start:end],
                char_start=offset + start,
                char_end=offset + end,
                kind="known" if known else "unknown",
                chunk_idx=chunk_idx,
            )
            for start, end, known in maximal_matching(dictionary, text)
        ]
