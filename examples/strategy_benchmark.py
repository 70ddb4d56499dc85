#!/usr/bin/env python3
"""
Benchmark the sequential and parallel dispatch strategies.

Both strategies must return the same tokens; this script checks that and
compares their timings over several runs. Thread pools only pay off when
the text has many chunks, so the input is a long run of whitespace
separated Thai phrases.

Usage:
    python examples/strategy_benchmark.py

Requires:
    pip install pymaxmatch[examples]
"""

import time

import numpy as np

from pymaxmatch import ThaiTokenizer, TokenizerConfig

WORDS = ["กรรมกร", "ที่", "เอา", "งาน", "การบ้าน", "ภาษาไทย", "ง่าย", "นิดเดียว"]

# Repeat for a meaningful amount of work
TEXT = " ".join("".join(WORDS[i:] + WORDS[:i]) + "xyz" for i in range(len(WORDS))) * 500
RUNS = 7


def benchmark_strategy(strategy: str) -> tuple[np.ndarray, list[str]]:
    """
    Time repeated tokenization with one strategy.

    Args:
        strategy: "sequential" or "parallel"

    Returns:
        Tuple of (timings in seconds, tokens from the last run)
    """
    tokenizer = ThaiTokenizer(WORDS, TokenizerConfig(strategy=strategy))
    tokenizer.tokenize(TEXT[:1000])  # warmup

    timings = np.empty(RUNS)
    tokens: list[str] = []
    for i in range(RUNS):
        start = time.perf_counter()
        tokens = tokenizer.tokenize(TEXT)
        timings[i] = time.perf_counter() - start
    return timings, tokens


def main():
    print("=" * 60)
    print("PYMAXMATCH STRATEGY BENCHMARK")
    print("=" * 60)
    print(f"\nText length: {len(TEXT)} characters, {len(TEXT.split())} chunks")
    print(f"Runs per strategy: {RUNS}")

    results = {}
    for strategy in ("sequential", "parallel"):
        results[strategy] = benchmark_strategy(strategy)

    seq_tokens = results["sequential"][1]
    par_tokens = results["parallel"][1]
    if seq_tokens != par_tokens:
        print("\n✗ Strategies disagree!")
        return
    print(f"\n✓ Both strategies produced {len(seq_tokens)} identical tokens")

    print(f"\n{'Strategy':<12} {'Median (s)':>12} {'Mean (s)':>10} {'Std':>8}")
    print("-" * 60)
    for strategy, (timings, _) in results.items():
        print(
            f"{strategy:<12} {np.median(timings):>12.4f} "
            f"{timings.mean():>10.4f} {timings.std():>8.4f}"
        )

    speedup = np.median(results["sequential"][0]) / np.median(results["parallel"][0])
    print(f"\nParallel speedup: {speedup:.2f}x")


if __name__ == "__main__":
    main()
