#!/usr/bin/env python3
"""
Tokenize Thai and English text.

This example builds a small in-memory dictionary, segments a mixed
Thai/English sentence and prints every token with its offsets and kind.
A word list file (one word per line) can be passed instead.

Usage:
    python examples/tokenize_demo.py
    python examples/tokenize_demo.py path/to/words.txt

Output:
    Token table printed to stdout
"""

import logging
import sys

from pymaxmatch import (
    DictionaryLoadError,
    ThaiTokenizer,
    TokenizerConfig,
    WhitespaceTokenizer,
)

WORDS = [
    "การ",
    "การบ้าน",
    "บ้าน",
    "ภาษา",
    "ภาษาไทย",
    "ไทย",
    "ง่าย",
    "นิดเดียว",
    "มากๆ",
]

TEXT = "ภาษาไทยง่ายนิดเดียว การบ้าน  easy มากๆ ครับ"


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    source = sys.argv[1] if len(sys.argv) > 1 else WORDS

    try:
        tokenizer = ThaiTokenizer(source, TokenizerConfig(return_trace=True))
    except DictionaryLoadError as e:
        print(f"✗ {e}")
        sys.exit(1)

    with tokenizer:
        result = tokenizer.analyze(TEXT)

    print(f"\nInput: {TEXT}")
    print(f"Dictionary: {tokenizer.dictionary!r}")
    print(f"\n{'Token':<12} {'Start':>6} {'End':>6}  Kind")
    print("-" * 40)
    for token in result.tokens:
        print(f"{token.text:<12} {token.char_start:>6} {token.char_end:>6}  {token.kind}")

    if result.trace:
        print("\nTrace:")
        for event in result.trace.events:
            print(f"  {event.stage}/{event.name}: {event.ms:.3f} ms {event.details}")
        for warning in result.trace.warnings:
            print(f"  ⚠ {warning}")

    print("\nWhitespace tokenizer:")
    print(f"  {WhitespaceTokenizer().tokenize('hello world, how are you?')}")


if __name__ == "__main__":
    main()
