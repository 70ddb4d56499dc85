"""Exceptions raised by pymaxmatch."""

from __future__ import annotations

from typing import Literal

LoadErrorReason = Literal["not_found", "decode_error"]


class DictionaryLoadError(Exception):
    """A word list could not be read or decoded.

    Args:
        source: Path or hub identifier of the word list
        reason: ``"not_found"`` when the source is missing or unreadable,
            ``"decode_error"`` when its bytes are not valid text
        detail: Human readable cause
    """

    NOT_FOUND: LoadErrorReason = "not_found"
    DECODE_ERROR: LoadErrorReason = "decode_error"

    def __init__(self, source: str, reason: LoadErrorReason, detail: str = "") -> None:
        self.source = source
        self.reason = reason
        self.detail = detail
        message = f"Cannot load dictionary from {source!r} ({reason})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
