"""Report sinks for finished benchmark results."""

from .base import (
    ReportSink as ReportSink,
)
from .chart import (
    ChartConfig as ChartConfig,
)
from .chart import (
    ChartReportSink as ChartReportSink,
)
from .json import (
    JsonReportSink as JsonReportSink,
)
from .text import (
    TextReportSink as TextReportSink,
)
