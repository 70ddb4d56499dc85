from __future__ import annotations

from ...constants import STRATEGIES
from ..protocols import Dispatcher
from .parallel import ParallelDispatcher
from .sequential import SequentialDispatcher

__all__ = ["ParallelDispatcher", "SequentialDispatcher", "dispatcher_for"]


def dispatcher_for(strategy: str, *, max_workers: int | None = None) -> Dispatcher:
    """Return the dispatcher implementing ``strategy``."""
    if strategy == "sequential":
        return SequentialDispatcher()
    if strategy == "parallel":
        return ParallelDispatcher(max_workers=max_workers)
    raise ValueError(f"Unknown strategy {strategy!r}; expected one of {STRATEGIES}")
