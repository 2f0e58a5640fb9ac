"""Stage timing for the build pipeline.

span() wraps one stage, logs its wall-clock duration at DEBUG and,
when given a dict, records it there so callers can report a breakdown.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

log = logging.getLogger(__name__)


@contextmanager
def span(label: str, timings: dict[str, float] | None = None) -> Iterator[None]:
    t0 = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - t0) * 1000
        if timings is not None:
            timings[label] = timings.get(label, 0.0) + elapsed_ms
        log.debug("%s: %.1f ms", label, elapsed_ms)
