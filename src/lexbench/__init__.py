"""Lexeme classification and container micro-benchmark harness."""

from .app import (
    load_source as load_source,
)
from .app import (
    run_timing_analysis as run_timing_analysis,
)
from .benchmark import (
    AllTokensSelection as AllTokensSelection,
)
from .benchmark import (
    BenchmarkConfig as BenchmarkConfig,
)
from .benchmark import (
    BenchmarkEngine as BenchmarkEngine,
)
from .benchmark import (
    BenchmarkResults as BenchmarkResults,
)
from .benchmark import (
    OperationKind as OperationKind,
)
from .benchmark import (
    OperationStats as OperationStats,
)
from .benchmark import (
    RandomPrefixSelection as RandomPrefixSelection,
)
from .benchmark import (
    default_workload as default_workload,
)
from .containers import (
    ContainerAdapter as ContainerAdapter,
)
from .containers import (
    ContainerKind as ContainerKind,
)
from .containers import (
    ContainerRegistry as ContainerRegistry,
)
from .containers import (
    DuplicatePolicy as DuplicatePolicy,
)
from .errors import (
    InvalidInput as InvalidInput,
)
from .errors import (
    LexbenchError as LexbenchError,
)
from .errors import (
    NoLexemesAvailable as NoLexemesAvailable,
)
from .errors import (
    ReportError as ReportError,
)
from .errors import (
    UnknownOperationKind as UnknownOperationKind,
)
from .lexeme import (
    LexemeCategory as LexemeCategory,
)
from .lexeme import (
    LexemeGenerator as LexemeGenerator,
)
from .lexeme import (
    TokenSet as TokenSet,
)
from .lexeme import (
    classify as classify,
)
from .logging import (
    Logger as Logger,
)
from .logging import (
    LoggerConfig as LoggerConfig,
)
from .logging import (
    LogLevel as LogLevel,
)
from .reporting import (
    ChartReportSink as ChartReportSink,
)
from .reporting import (
    JsonReportSink as JsonReportSink,
)
from .reporting import (
    ReportSink as ReportSink,
)
from .reporting import (
    TextReportSink as TextReportSink,
)
from .statistics import (
    ConfidenceInterval as ConfidenceInterval,
)
from .statistics import (
    confidence_interval as confidence_interval,
)

__all__ = [
    # Lexemes
    "LexemeCategory",
    "LexemeGenerator",
    "TokenSet",
    "classify",
    # Containers
    "ContainerAdapter",
    "ContainerKind",
    "ContainerRegistry",
    "DuplicatePolicy",
    # Benchmark
    "AllTokensSelection",
    "BenchmarkConfig",
    "BenchmarkEngine",
    "BenchmarkResults",
    "OperationKind",
    "OperationStats",
    "RandomPrefixSelection",
    "default_workload",
    # Statistics
    "ConfidenceInterval",
    "confidence_interval",
    # Reporting
    "ChartReportSink",
    "JsonReportSink",
    "ReportSink",
    "TextReportSink",
    # Logging
    "Logger",
    "LoggerConfig",
    "LogLevel",
    # Errors
    "InvalidInput",
    "LexbenchError",
    "NoLexemesAvailable",
    "ReportError",
    "UnknownOperationKind",
    # Application
    "load_source",
    "run_timing_analysis",
]
