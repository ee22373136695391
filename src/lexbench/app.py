"""Application shell tying classifier, engine and sinks together."""

from __future__ import annotations

import pathlib
from collections.abc import Sequence
from importlib import resources

import numpy as np

from lexbench.benchmark import (
    BenchmarkConfig,
    BenchmarkEngine,
    BenchmarkResults,
    SelectionPolicy,
    default_workload,
)
from lexbench.containers.registry import ContainerRegistry
from lexbench.errors import InvalidInput
from lexbench.lexeme import classify
from lexbench.logging import Logger
from lexbench.reporting import ReportSink

SAMPLE_CODE = "sample_code.txt"


def load_source(path: str | pathlib.Path | None = None) -> str:
    """Read the source text to classify.

    Args:
        path: File to read. Defaults to the bundled Java-like sample.

    Raises:
        InvalidInput: If the file cannot be read.
    """
    try:
        if path is None:
            return resources.files("lexbench").joinpath("data", SAMPLE_CODE).read_text(encoding="utf-8")
        return pathlib.Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise InvalidInput(f"Failed to load source file {path or SAMPLE_CODE}: {e}") from e


def run_timing_analysis(
    source: str,
    config: BenchmarkConfig | None = None,
    sinks: Sequence[ReportSink] = (),
    logger: Logger | None = None,
    rng: np.random.Generator | None = None,
    selection: SelectionPolicy | None = None,
    registry: ContainerRegistry | None = None,
) -> BenchmarkResults:
    """Classify `source`, run the default workload and hand the results to every sink.

    Args:
        source: Raw source text.
        config: Session configuration; its `category` narrows classification
            and `repeat_count` sets the number of workload cycles.
        sinks: Report sinks, emitted to in order.
        logger: Logger for progress output.
        rng: Random source, defaults to one seeded from `config.seed`.
        selection: Seed selection policy, defaults to a random prefix.
        registry: Container registry, defaults to the built-in one.

    Returns:
        The results table.

    Raises:
        InvalidInput: If `source` is empty.
        NoLexemesAvailable: If classification found nothing to seed with.
        ReportError: If a sink failed.
    """
    config = config if config is not None else BenchmarkConfig.default()
    if logger is not None:
        logger.info("Performing timing analysis...")

    tokens = classify(source, config.category)
    if logger is not None:
        logger.debug(f"Classified {tokens.total} lexemes across {len(tokens)} categories")

    engine = BenchmarkEngine(config=config, rng=rng, logger=logger, registry=registry)
    results = engine.run(tokens, default_workload(config.repeat_count), selection=selection)

    if logger is not None:
        logger.flush()
    for sink in sinks:
        sink.emit(results)
    return results
