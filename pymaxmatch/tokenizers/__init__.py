from .base import Tokenizer
from .thai import ThaiTokenizer
from .whitespace import WhitespaceTokenizer

__all__ = ["Tokenizer", "ThaiTokenizer", "WhitespaceTokenizer"]
