from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .constants import DEFAULT_CONFIG, STRATEGIES

Strategy = Literal["sequential", "parallel"]


@dataclass(frozen=True)
class TokenizerConfig:
    """User-facing configuration for a tokenizer.

    ``strategy`` only changes how chunks are executed, never the tokens.
    Keep this frozen+hashable so it can be shared between tokenizers.
    """

    strategy: Strategy = DEFAULT_CONFIG["strategy"]
    max_workers: int | None = DEFAULT_CONFIG["max_workers"]

    # Behavior toggles
    return_trace: bool = False

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown strategy {self.strategy!r}; expected one of {STRATEGIES}"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")
