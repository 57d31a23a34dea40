from ._config import RunConfig
from ._exceptions import ParameterError, SimulatorIOError
from ._runner import RunResult, TimingSamples, run_benchmark
from ._stats import OperationStats, format_stats, summarize
from ._timing import measure

__all__ = [
    "RunConfig",
    "RunResult",
    "TimingSamples",
    "OperationStats",
    "ParameterError",
    "SimulatorIOError",
    "run_benchmark",
    "measure",
    "summarize",
    "format_stats",
]
__version__ = "0.1.0"
