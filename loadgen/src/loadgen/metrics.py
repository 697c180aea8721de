"""Process-wide counters and duration histograms shared by every session."""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

SUCCESS = "success"
ERROR = "error"
STATUSES = frozenset({SUCCESS, ERROR})

StopTimer = Callable[[str], float]


@dataclass(frozen=True)
class Metrics:
    connected: Counter
    login: Histogram
    messages: Histogram
    open_room: Histogram
    room_subscribe: Histogram

    @classmethod
    def create(cls, registry: CollectorRegistry | None = None) -> "Metrics":
        registry = REGISTRY if registry is None else registry

        def histogram(name: str, documentation: str) -> Histogram:
            return Histogram(name, documentation, ["status"], registry=registry)

        return cls(
            connected=Counter("loadgen_connected", "Transport connections opened", registry=registry),
            login=histogram("loadgen_login_seconds", "Login plus authenticated setup duration"),
            messages=histogram("loadgen_messages_seconds", "Send message duration"),
            open_room=histogram("loadgen_open_room_seconds", "Open room duration"),
            room_subscribe=histogram("loadgen_room_subscribe_seconds", "Room subscription duration"),
        )


_default_lock = threading.Lock()
_default: Optional[Metrics] = None


def default_metrics() -> Metrics:
    global _default
    with _default_lock:
        if _default is None:
            _default = Metrics.create()
        return _default


def start_timer(histogram: Histogram, *, clock: Callable[[], float] = time.perf_counter) -> StopTimer:
    """Start timing; the returned callable records the elapsed seconds under ``status``.

    The stop callable may be invoked exactly once.
    """

    started = clock()
    stopped = False

    def stop(status: str) -> float:
        nonlocal stopped
        if status not in STATUSES:
            raise ValueError(f"unknown status: {status!r}")
        if stopped:
            raise RuntimeError("timer already stopped")
        stopped = True
        elapsed = max(clock() - started, 0.0)
        histogram.labels(status=status).observe(elapsed)
        return elapsed

    return stop


@contextmanager
def track(histogram: Histogram) -> Iterator[None]:
    """Time the block: ``success`` on normal exit, ``error`` when anything escapes it."""

    stop = start_timer(histogram)
    try:
        yield
    except BaseException:
        stop(ERROR)
        raise
    stop(SUCCESS)
