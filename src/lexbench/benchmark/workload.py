"""Workloads handed to `BenchmarkEngine.run`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from lexbench.lexeme.generator import LexemeGenerator

if TYPE_CHECKING:
    from lexbench.benchmark.engine import BenchmarkEngine, Workload


def default_workload(
    repeat_count: int,
    generator: LexemeGenerator | None = None,
    rng: np.random.Generator | None = None,
) -> Workload:
    """Mixed add/search/remove workload.

    Each cycle adds a freshly generated lexeme, then looks up a lexeme at a
    random index of the reference container and searches for it, then does
    the same for a removal. Lookups that land past the end are skipped.

    Args:
        repeat_count: Number of cycles.
        generator: Source of new lexemes. Defaults to one sharing the engine's RNG.
        rng: Random source for indices. Defaults to the engine's RNG.

    Returns:
        A closure taking the engine.

    Raises:
        ValueError: If repeat_count is negative.
    """
    if repeat_count < 0:
        raise ValueError(f"Invalid repeat_count; expected >=0 but got {repeat_count}")

    def workload(engine: BenchmarkEngine) -> None:
        index_rng = rng if rng is not None else engine.rng
        lexemes = generator if generator is not None else LexemeGenerator(engine.rng)
        logger = engine.logger

        for _ in range(repeat_count):
            new_lexeme = lexemes.generate_one()
            if logger is not None:
                logger.debug(f"Adding lexeme: {new_lexeme}")
            engine.add_lexeme(new_lexeme)

            search_lexeme = engine.lexeme_at(int(index_rng.integers(engine.random_lexeme_count())))
            if search_lexeme is not None:
                if logger is not None:
                    logger.debug(f"Searching lexeme: {search_lexeme}")
                engine.search_lexeme(search_lexeme)

            remove_lexeme = engine.lexeme_at(int(index_rng.integers(engine.random_lexeme_count())))
            if remove_lexeme is not None:
                if logger is not None:
                    logger.debug(f"Removing lexeme: {remove_lexeme}")
                engine.remove_lexeme(remove_lexeme)

    return workload
