"""Word dictionary for maximum matching segmentation.

A :class:`Dictionary` is an immutable character trie built once from a word
list. After construction it is read-only, so a single instance can be shared
by every tokenizer call and every worker thread without locking.

Word lists are plain text with one word per line::

    กรุงเทพ
    กรุงเทพมหานคร
    จังหวัด
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from huggingface_hub import hf_hub_download
from huggingface_hub.errors import (
    HfHubHTTPError,
    HFValidationError,
    LocalEntryNotFoundError,
)

from .constants import DEFAULT_ENCODING, HF_REPO_TYPE, HF_WORDLIST_FILENAME
from .exceptions import DictionaryLoadError

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.terminal = False


class DictionaryBuilder:
    """Mutable accumulator of words, frozen into a :class:`Dictionary`.

    Surrounding whitespace is stripped from every word and blank entries are
    ignored, so raw lines from a word list can be added directly.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: set[str] = set()
        self.update(words)

    def add(self, word: str) -> None:
        word = word.strip()
        if word:
            self._words.add(word)

    def update(self, words: Iterable[str]) -> None:
        if isinstance(words, str):
            raise TypeError("words must be an iterable of strings, not a str")
        for word in words:
            self.add(word)

    def __len__(self) -> int:
        return len(self._words)

    def build(self) -> Dictionary:
        return Dictionary(self._words)


class Dictionary:
    """Immutable set of known words with prefix queries.

    Args:
        words: Words to index. Use :class:`DictionaryBuilder` or
            :meth:`from_words` to normalize raw input first.
    """

    __slots__ = ("_words", "_root", "_max_word_length")

    def __init__(self, words: Iterable[str] = ()) -> None:
        if isinstance(words, str):
            raise TypeError("words must be an iterable of strings, not a str")
        self._words = frozenset(w for w in words if w)
        self._root = _Node()
        self._max_word_length = 0
        for word in self._words:
            node = self._root
            for ch in word:
                child = node.children.get(ch)
                if child is None:
                    child = node.children[ch] = _Node()
                node = child
            node.terminal = True
            self._max_word_length = max(self._max_word_length, len(word))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        """Build a dictionary from an iterable of words."""
        return DictionaryBuilder(words).build()

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], encoding: str = DEFAULT_ENCODING
    ) -> Dictionary:
        """Load a newline delimited word list.

        Raises:
            DictionaryLoadError: If the file cannot be opened (``not_found``)
                or is not valid text in ``encoding`` (``decode_error``).
        """
        path = Path(path)
        builder = DictionaryBuilder()
        try:
            with path.open("r", encoding=encoding) as f:
                for line in f:
                    builder.add(line)
        except UnicodeDecodeError as e:
            raise DictionaryLoadError(
                str(path),
                DictionaryLoadError.DECODE_ERROR,
                f"invalid {encoding} data at byte {e.start}",
            ) from e
        except OSError as e:
            raise DictionaryLoadError(
                str(path),
                DictionaryLoadError.NOT_FOUND,
                e.strerror or "file not readable",
            ) from e

        dictionary = builder.build()
        logger.info("Loaded %d words from %s", len(dictionary), path)
        if not dictionary:
            logger.warning(
                "Dictionary %s is empty; all text will segment as unknown", path
            )
        return dictionary

    @classmethod
    def from_hub(
        cls,
        repo_id: str,
        filename: str = HF_WORDLIST_FILENAME,
        *,
        revision: str | None = None,
        repo_type: str = HF_REPO_TYPE,
        cache_dir: str | os.PathLike[str] | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> Dictionary:
        """Download a word list from Hugging Face Hub and load it.

        ``hf_hub_download`` keeps its own cache, so repeated calls reuse the
        local copy.
        """
        source = f"{repo_id}/{filename}"
        try:
            downloaded_path = hf_hub_download(
                repo_id=repo_id,
                filename=filename,
                repo_type=repo_type,
                revision=revision,
                cache_dir=str(cache_dir) if cache_dir else None,
            )
        except (
            LocalEntryNotFoundError,
            HfHubHTTPError,
            HFValidationError,
            OSError,
        ) as e:
            raise DictionaryLoadError(
                source,
                DictionaryLoadError.NOT_FOUND,
                "repository or file not available",
            ) from e
        logger.debug("Downloaded %s to %s", source, downloaded_path)
        return cls.from_file(downloaded_path, encoding=encoding)

    @classmethod
    def load(
        cls, source: str | os.PathLike[str] | Iterable[str] | Dictionary
    ) -> Dictionary:
        """Build from a path to a word list or from an iterable of words.

        An existing Dictionary is returned as is.
        """
        if isinstance(source, Dictionary):
            return source
        if isinstance(source, str | os.PathLike):
            return cls.from_file(source)
        return cls.from_words(source)

    @classmethod
    def build(
        cls, source: str | os.PathLike[str] | Iterable[str] | Dictionary
    ) -> Dictionary:
        """Build from a word list source; see :meth:`load`.

        Raises:
            DictionaryLoadError: If a word list path cannot be read or decoded.
        """
        return cls.load(source)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def max_word_length(self) -> int:
        """Length in characters of the longest word (0 when empty)."""
        return self._max_word_length

    @property
    def words(self) -> frozenset[str]:
        return self._words

    def contains(self, word: str) -> bool:
        return word in self._words

    def longest_match_at(self, text: str, start: int) -> int | None:
        """Return the end offset of the longest word starting at ``start``.

        Walks at most ``max_word_length`` characters. Returns None when no
        known word begins exactly at ``start``.
        """
        if start < 0 or start >= len(text):
            return None
        node = self._root
        best = None
        limit = min(len(text), start + self._max_word_length)
        for i in range(start, limit):
            node = node.children.get(text[i])
            if node is None:
                break
            if node.terminal:
                best = i + 1
        return best

    def prefixes_at(self, text: str, start: int) -> list[int]:
        """Return end offsets of every word starting at ``start``, shortest first."""
        ends: list[int] = []
        if start < 0 or start >= len(text):
            return ends
        node = self._root
        limit = min(len(text), start + self._max_word_length)
        for i in range(start, limit):
            node = node.children.get(text[i])
            if node is None:
                break
            if node.terminal:
                ends.append(i + 1)
        return ends

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self._words == other._words

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return (
            f"Dictionary(words={len(self._words)}, "
            f"max_word_length={self._max_word_length})"
        )
