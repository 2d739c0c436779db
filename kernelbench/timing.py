"""Wall-clock and CPU-time measurement around a benchmark run."""

from __future__ import annotations

import sys
import time
from typing import TextIO


class Stopwatch:
    """Measures real and CPU time between start() and stop().

    On stop() the report line is written to the stream unless quiet.
    """

    def __init__(self, stream: TextIO | None = None, quiet: bool = False) -> None:
        self._stream = stream
        self._quiet = quiet
        self._begin_real: float | None = None
        self._begin_cpu: float | None = None
        self.real_elapsed: float | None = None
        self.cpu_elapsed: float | None = None

    def start(self) -> None:
        """Begin timing."""
        self._begin_real = time.perf_counter()
        self._begin_cpu = time.process_time()
        self.real_elapsed = None
        self.cpu_elapsed = None

    def stop(self) -> tuple[float, float]:
        """End timing; return (real, cpu) elapsed seconds."""
        if self._begin_real is None or self._begin_cpu is None:
            raise RuntimeError("stopwatch was not started")
        self.real_elapsed = time.perf_counter() - self._begin_real
        self.cpu_elapsed = time.process_time() - self._begin_cpu
        self._begin_real = None
        self._begin_cpu = None
        if not self._quiet:
            stream = self._stream if self._stream is not None else sys.stdout
            print(self.report(), file=stream)
        return self.real_elapsed, self.cpu_elapsed

    def report(self) -> str:
        """Describe the last measurement in milliseconds."""
        if self.real_elapsed is None or self.cpu_elapsed is None:
            raise RuntimeError("no measurement has been taken")
        return (
            f"Real time: {self.real_elapsed * 1000.0:.6f} ms "
            f"CPU time: {self.cpu_elapsed * 1000.0:.6f} ms "
        )

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()