from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from ..types import Trace, TraceEvent


@contextmanager
def trace_timing(
    trace: Trace | None, stage: str, name: str, **details: Any
) -> Iterator[dict[str, Any]]:
    """Record the wall time of the enclosed block as a TraceEvent.

    The yielded dict is stored as the event details, so callers can add
    counts discovered inside the block.
    """
    start = time.perf_counter()
    try:
        yield details
    finally:
        if trace is not None:
            ms = (time.perf_counter() - start) * 1000.0
            trace.events.append(
                TraceEvent(stage=stage, name=name, ms=ms, details=dict(details))
            )
