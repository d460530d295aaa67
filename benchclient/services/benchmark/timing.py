"""
Benchmark Timing

Per-run timestamps for TTFT and end-to-end latency.
"""

import time
from collections.abc import Callable
from enum import Enum

from .stream import StreamChunk


class TimingState(Enum):
    """Lifecycle of a timing tracker (linear, never moves backwards)"""

    NOT_STARTED = "not_started"
    FIRST_BYTE_SEEN = "first_byte_seen"
    COMPLETED = "completed"


class TimingTracker:
    """
    Records dispatch, first-content and completion timestamps for one run.

    ``clock`` must be monotonic; it defaults to :func:`time.perf_counter`.
    TTFT is captured once, on the first chunk carrying generated text, and
    stays at 0.0 when the backend never produced any.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._t0: float | None = None
        self.state = TimingState.NOT_STARTED
        self.first_seen = False
        self.ttft_seconds = 0.0
        self.total_seconds = 0.0

    def start(self) -> None:
        """Mark request dispatch"""
        self._t0 = self._clock()
        self.state = TimingState.NOT_STARTED
        self.first_seen = False

    def observe(self, chunk: StreamChunk) -> None:
        """Capture TTFT if this is the first chunk with content"""
        if self.first_seen or not chunk.has_content:
            return
        if self.state is TimingState.COMPLETED:
            return
        self.ttft_seconds = self._elapsed()
        self.first_seen = True
        self.state = TimingState.FIRST_BYTE_SEEN

    def complete(self) -> None:
        """Mark end of stream and capture total duration"""
        if self.state is TimingState.COMPLETED:
            return
        self.total_seconds = self._elapsed()
        self.state = TimingState.COMPLETED

    def _elapsed(self) -> float:
        if self._t0 is None:
            raise RuntimeError("TimingTracker.start() was not called")
        return self._clock() - self._t0
