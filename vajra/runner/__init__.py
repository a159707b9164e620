r"""
Benchmark runner.

Process execution, timing, warmup and measurement of a single command.

    from vajra.runner import BenchmarkEngine, default_runner

    engine = BenchmarkEngine()
    result = engine.run(config, default_runner())
"""

from vajra.runner.engine import BenchmarkEngine, EngineOptions
from vajra.runner.process import PosixProcessRunner, SubprocessRunner, WindowsProcessRunner, default_runner
from vajra.runner.profiler import PerfResult, Profiler
from vajra.runner.timing import Timer, measure_iterations, timed_section

__all__ = [
    "BenchmarkEngine",
    "EngineOptions",
    "PerfResult",
    "PosixProcessRunner",
    "Profiler",
    "SubprocessRunner",
    "Timer",
    "WindowsProcessRunner",
    "default_runner",
    "measure_iterations",
    "timed_section",
]
