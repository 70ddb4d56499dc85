from __future__ import annotations

from typing import Protocol

from ..types import Token, TokenizeResult


class Tokenizer(Protocol):
    """Contract shared by every tokenizer. ``tokenize`` never raises."""

    def tokenize(self, text: str) -> list[str]: ...

    def tokenize_spans(self, text: str) -> list[Token]: ...

    def analyze(self, text: str) -> TokenizeResult: ...
