"""Stopwatch — state machine measuring elapsed monotonic time.

Invariants:
    - Exactly one StopwatchState at a time; every mutating operation checks it first
    - A rejected operation raises IllegalStateError and leaves every field untouched
    - stop_time is meaningful only when STOPPED, SUSPENDED, or is_split
    - Only reset and unsplit clear is_split; stop and suspend overwrite stop_time but keep the flag
    - resume advances start_time by the suspended interval; stop_time is never rewound
    - Not thread-safe: concurrent callers must serialize access themselves

Design Decisions:
    - Clock injected via MonotonicClock protocol: tests drive time by hand
    - Mutators return self so calls chain: Stopwatch(clock).start().split()
    - elapsed() never fails: READY reads as zero, frozen states read stop_time - start_time
"""

from datetime import timedelta

from lapwatch.core.clock_protocols import MonotonicClock
from lapwatch.core.convert_duration import convert_nanos
from lapwatch.core.domain_types import Instant, Nanos, StopwatchState, TimeUnit
from lapwatch.core.errors import IllegalStateError
from lapwatch.core.format_elapsed import format_elapsed


class Stopwatch:
    """Measures elapsed time across start/stop/suspend/resume/split calls.

    Reading the time at any moment returns an appropriate result; calling
    stop(), split() or suspend() first makes the intent explicit.
    """

    def __init__(self, clock: MonotonicClock | None = None):
        if clock is None:
            from lapwatch.infrastructure.system_clock import SystemClock
            clock = SystemClock()
        self._clock = clock
        self._init()

    def _init(self) -> None:
        self._state = StopwatchState.READY
        self._start_time = Instant(0)
        self._stop_time = Instant(0)
        self._is_split = False

    # ─── Read-only view ──────────────────────────────────────────

    @property
    def state(self) -> StopwatchState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == StopwatchState.RUNNING

    @property
    def is_split(self) -> bool:
        return self._is_split

    @property
    def start_time(self) -> Instant:
        return self._start_time

    @property
    def stop_time(self) -> Instant:
        return self._stop_time

    # ─── Transitions ─────────────────────────────────────────────

    def start(self) -> "Stopwatch":
        """READY -> RUNNING."""
        if self._state != StopwatchState.READY:
            self._reject("start", "The stopwatch is already started")
        self._start_time = self._clock.now()
        self._state = StopwatchState.RUNNING
        return self

    def stop(self) -> "Stopwatch":
        """RUNNING | SUSPENDED -> STOPPED.

        From SUSPENDED the suspend instant already sits in stop_time and is kept.
        """
        if self._state not in (StopwatchState.RUNNING, StopwatchState.SUSPENDED):
            self._reject("stop", "The stopwatch is not started")
        if self._state == StopwatchState.RUNNING:
            self._stop_time = self._clock.now()
        self._state = StopwatchState.STOPPED
        return self

    def suspend(self) -> "Stopwatch":
        """RUNNING -> SUSPENDED. Time spent suspended is not counted."""
        if self._state != StopwatchState.RUNNING:
            self._reject("suspend", "The stopwatch is not running")
        self._stop_time = self._clock.now()
        self._state = StopwatchState.SUSPENDED
        return self

    def resume(self) -> "Stopwatch":
        """SUSPENDED -> RUNNING."""
        if self._state != StopwatchState.SUSPENDED:
            self._reject("resume", "The stopwatch is not suspended")
        self._start_time = Instant(
            self._start_time + (self._clock.now() - self._stop_time)
        )
        self._state = StopwatchState.RUNNING
        return self

    def reset(self) -> "Stopwatch":
        """Any state -> READY. Never fails."""
        self._init()
        return self

    def restart(self) -> "Stopwatch":
        """Equivalent to reset().start()."""
        return self.reset().start()

    def split(self) -> "Stopwatch":
        """Freeze a lap reading while the stopwatch keeps running."""
        if self._state != StopwatchState.RUNNING:
            self._reject("split", "The stopwatch is not running")
        self._stop_time = self._clock.now()
        self._is_split = True
        return self

    def unsplit(self) -> "Stopwatch":
        """Erase the split mark so elapsed() reads live again."""
        if not self._is_split:
            self._reject("unsplit", "No split time recorded")
        self._stop_time = Instant(0)
        self._is_split = False
        return self

    # ─── Readings ────────────────────────────────────────────────

    def elapsed_nanos(self) -> Nanos:
        if self._state == StopwatchState.RUNNING and not self._is_split:
            return Nanos(self._clock.now() - self._start_time)
        return Nanos(self._stop_time - self._start_time)

    def elapsed(self, unit: TimeUnit = TimeUnit.MILLISECONDS) -> int:
        """Elapsed time in `unit`, truncated toward zero.

        The reading is one of: start to stop, start to now, start to the
        suspend instant (minus earlier suspensions), or the last split.
        Nanosecond precision is available but includes the clock overhead.
        """
        return convert_nanos(self.elapsed_nanos(), unit)

    def elapsed_timedelta(self) -> timedelta:
        return timedelta(
            microseconds=convert_nanos(self.elapsed_nanos(), TimeUnit.MICROSECONDS)
        )

    # ─── Context manager ─────────────────────────────────────────

    def __enter__(self) -> "Stopwatch":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._state in (StopwatchState.RUNNING, StopwatchState.SUSPENDED):
            self.stop()

    # ─── Rendering ───────────────────────────────────────────────

    def __str__(self) -> str:
        return format_elapsed(self.elapsed())

    def __repr__(self) -> str:
        return (
            f"Stopwatch(state={self._state.value}, split={self._is_split}, "
            f"elapsed_ms={self.elapsed()})"
        )

    def _reject(self, operation: str, message: str) -> None:
        raise IllegalStateError(message, operation, self._state.value)
