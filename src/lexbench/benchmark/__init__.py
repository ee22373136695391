"""Benchmark engine, per-operation statistics and workloads."""

from .config import (
    BenchmarkConfig as BenchmarkConfig,
)
from .engine import (
    BenchmarkEngine as BenchmarkEngine,
)
from .engine import (
    Workload as Workload,
)
from .selection import (
    AllTokensSelection as AllTokensSelection,
)
from .selection import (
    RandomPrefixSelection as RandomPrefixSelection,
)
from .selection import (
    SelectionPolicy as SelectionPolicy,
)
from .stats import (
    BenchmarkResults as BenchmarkResults,
)
from .stats import (
    ContainerStats as ContainerStats,
)
from .stats import (
    OperationKind as OperationKind,
)
from .stats import (
    OperationStats as OperationStats,
)
from .stats import (
    OperationSummary as OperationSummary,
)
from .workload import (
    default_workload as default_workload,
)
