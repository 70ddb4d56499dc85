"""pymaxmatch - dictionary based maximum matching word segmentation."""

from .dictionary import Dictionary, DictionaryBuilder
from .exceptions import DictionaryLoadError
from .tokenizer_config import TokenizerConfig
from .tokenizers import ThaiTokenizer, Tokenizer, WhitespaceTokenizer
from .types import Chunk, Token, TokenizeResult

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "Chunk",
    "Dictionary",
    "DictionaryBuilder",
    "DictionaryLoadError",
    "ThaiTokenizer",
    "Token",
    "TokenizeResult",
    "Tokenizer",
    "TokenizerConfig",
    "WhitespaceTokenizer",
]
