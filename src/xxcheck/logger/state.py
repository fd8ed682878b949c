"""Process-wide logging state.

One ``LoggerState`` instance records whether the ``xxcheck`` root logger
has been set up and owns the queue and listener that carry its records.
"""

import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener


@dataclass
class LoggerState:
    """Root logger bookkeeping, guarded by ``lock`` during setup."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None


_state = LoggerState()


def get_state() -> LoggerState:
    """Return the process-wide logging state."""
    return _state
