r"""
Tests for vajra.runner.timing module.
"""

import time

from vajra.runner import Timer, measure_iterations, timed_section


class TestTimer:
    def test_timer_context_manager(self):
        with Timer() as t:
            time.sleep(0.001)

        assert t.elapsed_ns > 0
        assert t.elapsed_ms > 0
        assert t.elapsed_seconds > 0

    def test_timer_elapsed_values(self):
        with Timer() as t:
            pass

        assert t.elapsed_us == t.elapsed_ns / 1_000
        assert t.elapsed_ms == t.elapsed_ns / 1_000_000
        assert t.elapsed_seconds == t.elapsed_ns / 1_000_000_000

    def test_zero_before_start(self):
        t = Timer()
        assert t.started is False
        assert t.elapsed_ns == 0
        assert t.elapsed_ms == 0.0
        assert t.elapsed_seconds == 0.0

    def test_live_reading_while_running(self):
        t = Timer()
        t.start()
        first = t.elapsed_ns
        time.sleep(0.001)
        second = t.elapsed_ns

        assert t.running is True
        assert second > first

    def test_stopped_reading_is_frozen(self):
        t = Timer()
        t.start()
        t.stop()
        frozen = t.elapsed_ns
        time.sleep(0.001)

        assert t.running is False
        assert t.elapsed_ns == frozen

    def test_reset(self):
        t = Timer()
        t.start()
        t.stop()
        t.reset()

        assert t.started is False
        assert t.running is False
        assert t.elapsed_ns == 0

    def test_name(self):
        assert Timer("build").name == "build"
        assert Timer().name == "Timer"


class TestMeasureIterations:
    def test_counts_calls(self):
        calls = []

        timings = measure_iterations(lambda: calls.append(1), iterations=7, warmup=3)

        assert len(calls) == 10
        assert len(timings) == 7
        assert all(t >= 0 for t in timings)


class TestTimedSection:
    def test_callback(self):
        seen = []

        with timed_section("load", callback=lambda name, ns: seen.append((name, ns))) as t:
            pass

        assert seen == [("load", t.elapsed_ns)]
        assert t.name == "load"
