from __future__ import annotations

import re

from ...types import Chunk

__all__ = ["WhitespaceChunker"]

# Unicode White_Space: str.isspace minus the information separators U+001C-U+001F.
_CHUNK_RE = re.compile(r"[^\s\x1c-\x1f]+")


class WhitespaceChunker:
    """Split text into chunks at runs of whitespace.

    Whitespace itself is dropped and cannot be recovered from the chunks.
    """

    def split(self, text: str) -> list[Chunk]:
        if not text:
            return []
        return [
            Chunk(
                index=idx,
                text=match.group(0),
                char_start=match.start(),
                char_end=match.end(),
            )
            for idx, match in enumerate(_CHUNK_RE.finditer(text))
        ]
