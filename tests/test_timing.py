import io
import re

import pytest

from kernelbench.timing import Stopwatch

_REPORT = re.compile(r"^Real time: \d+\.\d{6} ms CPU time: \d+\.\d{6} ms $")


def test_stop_without_start_raises():
    with pytest.raises(RuntimeError):
        Stopwatch(quiet=True).stop()


def test_report_without_measurement_raises():
    with pytest.raises(RuntimeError):
        Stopwatch(quiet=True).report()


def test_start_stop_returns_elapsed():
    watch = Stopwatch(quiet=True)
    watch.start()
    sum(range(1000))
    real, cpu = watch.stop()
    assert real >= 0.0
    assert cpu >= 0.0
    assert (watch.real_elapsed, watch.cpu_elapsed) == (real, cpu)


def test_context_manager_writes_report():
    stream = io.StringIO()
    with Stopwatch(stream=stream) as watch:
        sum(range(1000))
    line = stream.getvalue().rstrip("\n")
    assert _REPORT.match(line)
    assert line == watch.report()


def test_stop_prints_to_stdout_by_default(capsys):
    watch = Stopwatch()
    watch.start()
    watch.stop()
    out = capsys.readouterr().out
    assert out.startswith("Real time: ")
    assert _REPORT.match(out.rstrip("\n"))


def test_quiet_writes_nothing():
    stream = io.StringIO()
    watch = Stopwatch(stream=stream, quiet=True)
    watch.start()
    watch.stop()
    assert stream.getvalue() == ""


def test_second_stop_needs_new_start():
    watch = Stopwatch(quiet=True)
    watch.start()
    watch.stop()
    with pytest.raises(RuntimeError):
        watch.stop()


def test_restart_clears_previous_measurement():
    watch = Stopwatch(quiet=True)
    watch.start()
    watch.stop()
    watch.start()
    with pytest.raises(RuntimeError):
        watch.report()