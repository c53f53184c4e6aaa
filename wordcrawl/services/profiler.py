"""Method timing for objects that opt in with `@profiled`.

`Profiler.wrap` returns a delegating proxy; only methods marked with
`@profiled` are timed, every other attribute is forwarded untouched.
"""
from __future__ import annotations

import functools
import inspect
import threading
from datetime import datetime, timedelta
from typing import Callable, Dict, TextIO

from wordcrawl.utils.datetime_utils import format_duration, format_rfc1123, utc_now

_PROFILED_ATTR = "__wordcrawl_profiled__"


def profiled(method: Callable) -> Callable:
    setattr(method, _PROFILED_ATTR, True)
    return method


def _is_profiled(value) -> bool:
    return bool(getattr(value, _PROFILED_ATTR, False))


def _profiled_method_names(cls) -> list[str]:
    names = []
    for name, member in inspect.getmembers(cls):
        if _is_profiled(member):
            names.append(name)
    return names


class ProfilingState:
    """Thread-safe totals of recorded call durations, keyed by `Class#method`."""

    def __init__(self):
        self._lock = threading.Lock()
        self._totals: Dict[str, timedelta] = {}

    def record(self, cls: type, method_name: str, elapsed: timedelta) -> None:
        # a wall clock stepping backwards must not fail the timed call
        elapsed = max(elapsed, timedelta(0))
        key = f"{cls.__module__}.{cls.__qualname__}#{method_name}"
        with self._lock:
            self._totals[key] = self._totals.get(key, timedelta(0)) + elapsed

    def totals(self) -> Dict[str, timedelta]:
        with self._lock:
            return dict(self._totals)

    def write_to(self, stream: TextIO) -> None:
        for key, total in sorted(self.totals().items()):
            stream.write(f"{key} took {format_duration(total)}\n")


class _ProfilingProxy:
    def __init__(self, delegate, clock: Callable[[], datetime], state: ProfilingState, method_names):
        self._delegate = delegate
        self._clock = clock
        self._state = state
        self._method_names = frozenset(method_names)

    def __getattr__(self, name):
        value = getattr(self._delegate, name)
        if name not in self._method_names or not callable(value):
            return value

        @functools.wraps(value)
        def timed(*args, **kwargs):
            start = self._clock()
            try:
                return value(*args, **kwargs)
            finally:
                self._state.record(type(self._delegate), name, self._clock() - start)

        return timed

    def __repr__(self):
        return f"<Profiled {self._delegate!r}>"


class Profiler:
    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._clock = clock
        self._state = ProfilingState()
        self._start_time = clock()

    @property
    def state(self) -> ProfilingState:
        return self._state

    def wrap(self, delegate):
        """Return a proxy for `delegate` that times its `@profiled` methods."""
        if delegate is None:
            raise ValueError("delegate is required")
        names = _profiled_method_names(type(delegate))
        if not names:
            raise ValueError(f"{type(delegate).__name__} has no profiled methods")
        return _ProfilingProxy(delegate, self._clock, self._state, names)

    def write_data(self, path: str) -> None:
        """Append profiling data to the file at `path`, creating it if needed."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_to(f)

    def write_to(self, stream: TextIO) -> None:
        stream.write(f"Run at {format_rfc1123(self._start_time)}\n")
        self._state.write_to(stream)
        stream.write("\n")
