from abc import ABC, abstractmethod

from lexbench.benchmark.stats import BenchmarkResults


class ReportSink(ABC):
    """Destination for a finished results table."""

    @abstractmethod
    def emit(self, results: BenchmarkResults) -> None:
        """Render or forward the results.

        Args:
            results: Results table of one benchmark session.

        Raises:
            ReportError: If the results could not be rendered.
        """
        pass
