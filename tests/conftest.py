from collections.abc import Iterator

import numpy as np
import pytest

from lexbench.app import load_source
from lexbench.logging import Logger, LoggerConfig, LogLevel, MemoryLogHandler

SEED = 1234


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def sample_code() -> str:
    """The bundled Java-like sample source."""
    return load_source()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random source so selections and workloads are reproducible."""
    return np.random.default_rng(SEED)


@pytest.fixture
def memory_handler() -> MemoryLogHandler:
    return MemoryLogHandler()


@pytest.fixture
def memory_logger(memory_handler: MemoryLogHandler) -> Iterator[Logger]:
    """Logger at TRACE that keeps messages in memory and never prints.

    The buffer holds a single message so every log call reaches
    `memory_handler` immediately.
    """
    logger = Logger(
        name="test",
        config=LoggerConfig(
            base_level=LogLevel.TRACE,
            do_stdout=False,
            str_format="%(levelname)s %(message)s",
            buffer_size=1,
        ),
        handlers=[memory_handler],
    )
    yield logger
    logger.shutdown()
