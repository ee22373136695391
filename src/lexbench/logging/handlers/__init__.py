from .base import BaseLogHandler as BaseLogHandler
from .file import FileLogHandler as FileLogHandler
from .file import JsonFileLogHandler as JsonFileLogHandler
from .memory import MemoryLogHandler as MemoryLogHandler

__all__ = [
    "BaseLogHandler",
    "FileLogHandler",
    "JsonFileLogHandler",
    "MemoryLogHandler",
]
