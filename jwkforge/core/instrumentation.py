from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstrumentationEvent:
    operation: str   # "build" or "export"
    algorithm: str
    elapsed: float   # seconds


Hook = Callable[[InstrumentationEvent], None]


@contextmanager
def instrumented(operation: str, algorithm: str, hook: Optional[Hook] = None) -> Iterator[None]:
    """
    Time the wrapped block and report it to ``hook`` once it completes.

    Nothing is reported when the block raises; the exception propagates as is.
    """
    started = time.perf_counter()
    yield
    elapsed = time.perf_counter() - started
    logger.debug("%s %s took %.6fs", operation, algorithm, elapsed)
    if hook is not None:
        hook(InstrumentationEvent(operation=operation, algorithm=algorithm, elapsed=elapsed))
