"""Bar charts of mean latency per container and operation."""

from __future__ import annotations

import pathlib
from typing import Self

from msgspec import Struct

from lexbench.benchmark.stats import BenchmarkResults, OperationKind
from lexbench.errors import ReportError
from lexbench.logging import Logger
from lexbench.reporting.base import ReportSink

AVERAGE_CHART = "average_performance.png"
CONFIDENCE_CHART = "confidence_performance.png"


class ChartConfig(Struct):
    """Output location and figure geometry for chart rendering."""

    output_dir: str = "charts"
    width: float = 8.0
    height: float = 4.5
    dpi: int = 150

    def __post_init__(self):
        """Validate figure geometry."""
        if not self.output_dir:
            raise ValueError("Invalid output_dir; expected a non-empty path")
        if not self.width > 0:
            raise ValueError(f"Invalid width; expected >0 but got {self.width}")
        if not self.height > 0:
            raise ValueError(f"Invalid height; expected >0 but got {self.height}")
        if not self.dpi > 0:
            raise ValueError(f"Invalid dpi; expected >0 but got {self.dpi}")

    @classmethod
    def default(cls) -> Self:
        """Charts written to ./charts at 8x4.5 inches, 150 dpi."""
        return cls()


class ChartReportSink(ReportSink):
    """Renders grouped bar charts of the results to PNG files.

    Two files are written into the output directory: `average_performance.png`
    with mean latency per operation, and `confidence_performance.png` with the
    same bars plus confidence-interval error bars.

    Args:
        output_dir: Directory the PNG files go to. Ignored when `config` is given.
        show: Also open an interactive window after saving.
        config: Full chart configuration.
        logger: Logger for progress and rendering failures.
    """

    def __init__(
        self,
        output_dir: str | pathlib.Path = "charts",
        show: bool = False,
        config: ChartConfig | None = None,
        logger: Logger | None = None,
    ) -> None:
        self.config = config if config is not None else ChartConfig(output_dir=str(output_dir))
        self.show = show
        self.logger = logger

    @property
    def output_dir(self) -> pathlib.Path:
        return pathlib.Path(self.config.output_dir)

    def emit(self, results: BenchmarkResults) -> None:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            self._plot(results, AVERAGE_CHART, "Average time per operation", with_ci=False)
            self._plot(results, CONFIDENCE_CHART, "Average time with 95% confidence interval", with_ci=True)
        except Exception as e:
            if self.logger is not None:
                self.logger.error(f"Failed to render charts into {self.output_dir}: {e}")
            raise ReportError(f"Failed to render charts into {self.output_dir}: {e}") from e

        if self.logger is not None:
            self.logger.info(f"Charts saved to {self.output_dir}")

    def _plot(self, results: BenchmarkResults, filename: str, title: str, with_ci: bool) -> None:
        import matplotlib

        if not self.show:
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        containers = results.containers
        operations = list(OperationKind)
        width = 0.8 / len(operations)
        x_positions = list(range(len(containers)))

        fig, ax = plt.subplots(figsize=(self.config.width, self.config.height))
        try:
            for idx, op in enumerate(operations):
                rows = [results.get(container, op) for container in containers]
                offsets = [pos + idx * width for pos in x_positions]
                means = [row.mean_ns for row in rows]
                if with_ci:
                    errors = [row.ci_half_width_ns for row in rows]
                    ax.bar(offsets, means, width=width, label=op.value, yerr=errors, capsize=4)
                else:
                    ax.bar(offsets, means, width=width, label=op.value)

            ax.set_xticks([pos + (len(operations) - 1) * width / 2 for pos in x_positions])
            ax.set_xticklabels(containers, rotation=30, ha="right")
            ax.set_ylabel("Mean latency (ns)")
            ax.set_title(title)
            ax.legend()
            ax.grid(True, axis="y", linestyle="--", alpha=0.3)
            fig.tight_layout()

            outfile = self.output_dir / filename
            fig.savefig(outfile, dpi=self.config.dpi)
            if self.logger is not None:
                self.logger.debug(f"Wrote chart {outfile}")
            if self.show:
                plt.show()
        finally:
            plt.close(fig)
