from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

TokenKind = Literal["known", "unknown", "chunk"]


@dataclass(frozen=True)
class Chunk:
    """A whitespace-free run of input text with offsets into the original text."""

    index: int
    text: str
    char_start: int
    char_end: int


@dataclass(frozen=True)
class Token:
    """A segmented word.

    Offsets refer to the text passed to ``tokenize``, not to the chunk.
    """

    text: str
    char_start: int
    char_end: int
    kind: TokenKind = "known"
    chunk_idx: int = 0


@dataclass(frozen=True)
class TraceEvent:
    stage: Literal["chunk", "dispatch"]
    name: str
    ms: float
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trace:
    """Structured debugging output."""

    events: list[TraceEvent] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass
class TokenizeResult:
    tokens: list[Token]
    chunks: list[Chunk] = field(default_factory=list)
    trace: Trace | None = None

    @property
    def words(self) -> list[str]:
        return [token.text for token in self.tokens]

    @property
    def unknown_tokens(self) -> list[Token]:
        return [token for token in self.tokens if token.kind == "unknown"]
