from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..types import Chunk, Token

if TYPE_CHECKING:
    from ..dictionary import Dictionary


class Chunker(Protocol):
    def split(self, text: str) -> list[Chunk]: ...


class Segmenter(Protocol):
    def segment(
        self,
        dictionary: Dictionary,
        text: str,
        *,
        offset: int = 0,
        chunk_idx: int = 0,
    ) -> list[Token]: ...


class Dispatcher(Protocol):
    name: str

    def dispatch(
        self, segmenter: Segmenter, dictionary: Dictionary, chunks: list[Chunk]
    ) -> list[Token]: ...
