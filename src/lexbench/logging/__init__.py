"""Synchronous buffered logging for benchmark runs."""

from .config import (
    LoggerConfig as LoggerConfig,
)
from .config import (
    LogLevel as LogLevel,
)
from .handlers import (
    BaseLogHandler as BaseLogHandler,
)
from .handlers import (
    FileLogHandler as FileLogHandler,
)
from .handlers import (
    JsonFileLogHandler as JsonFileLogHandler,
)
from .handlers import (
    MemoryLogHandler as MemoryLogHandler,
)
from .logger import (
    Logger as Logger,
)
from .system import (
    get_system_info as get_system_info,
)
