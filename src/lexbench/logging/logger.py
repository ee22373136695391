"""Synchronous single-process logger implementation."""

import sys
import traceback

from lexbench.logging.config import LoggerConfig, LogLevel
from lexbench.logging.handlers import BaseLogHandler
from lexbench.time.time import time_iso8601, time_s


class Logger:
    """A buffered logger that pushes messages to its handlers inline.

    Messages are flushed when the buffer fills, when the flush interval has
    elapsed, or immediately for WARNING and above. Nothing runs in the
    background, so logging never interleaves with a timed operation.
    """

    def __init__(
        self,
        name: str = "",
        config: LoggerConfig = None,
        handlers: list[BaseLogHandler] | None = None,
    ):
        """Initializes a Logger with specified configuration and handlers.

        Args:
            name (str): Name of the logger. Defaults to an empty string.
            config (LoggerConfig): Configuration settings for the logger (base level, stdout, buffer size, etc.).
            handlers (list[BaseLogHandler], optional): A list of handler objects that inherit from BaseLogHandler.
                Defaults to an empty list if not provided.

        Raises:
            TypeError: If one of the provided handlers does not inherit from BaseLogHandler.

        """
        self._name = name

        self._config = config
        if self._config is None:
            self._config = LoggerConfig()

        self._handlers = handlers
        if self._handlers is None:
            self._handlers = []

        for handler in self._handlers:
            if not isinstance(handler, BaseLogHandler):
                raise TypeError(
                    f"Invalid handler base class; expected BaseLogHandler but got {type(handler)}"
                )

            # Forwards str_format to handlers whose destination formats messages itself.
            handler.add_primary_config(self._config)

        self._buffer: list[str] = []
        self._buffer_start_time_s = time_s()
        self._is_running = True

    def flush(self) -> None:
        """Flushes the log message buffer to stdout and all handlers."""
        if not self._buffer:
            return

        buffer, self._buffer = self._buffer, []
        self._buffer_start_time_s = time_s()

        if self._config.do_stdout:
            for log_msg in buffer:
                print(log_msg)

        for handler in self._handlers:
            try:
                handler.push(buffer)
            except Exception:
                traceback.print_exc(file=sys.stderr)

    def _should_flush(self, level: LogLevel) -> bool:
        if level >= LogLevel.WARNING:
            return True
        if len(self._buffer) >= self._config.buffer_size:
            return True
        return (time_s() - self._buffer_start_time_s) >= self._config.flush_interval_s

    def _process_log(self, level: LogLevel, msg: str):
        """Formats and buffers a log message, flushing if required.

        Args:
            level (LogLevel): The severity level of the message.
            msg (str): The actual log message.

        """
        try:
            log_msg = self._config.str_format % {
                "asctime": time_iso8601(),
                "name": self._name,
                "levelname": level.name,
                "message": msg,
            }
        except (KeyError, TypeError, ValueError):
            traceback.print_exc(file=sys.stderr)
            return

        if not self._buffer:
            self._buffer_start_time_s = time_s()
        self._buffer.append(log_msg)

        if self._should_flush(level):
            self.flush()

    def _log(self, level: LogLevel, msg: str) -> None:
        if self._is_running and self._config.base_level <= level:
            self._process_log(level, msg)

    def set_log_level(self, level: LogLevel) -> None:
        """Modify the logger's base log level at runtime.

        Args:
            level (LogLevel): The new base log level.

        """
        self.debug(f"Changing base log level from {self._config.base_level.name} to {level.name}")
        self._config.base_level = level
        for handler in self._handlers:
            handler.add_primary_config(self._config)

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check whether a message at `level` would be recorded."""
        return self._is_running and self._config.base_level <= level

    def trace(self, msg: str) -> None:
        """Send a trace-level log message."""
        self._log(LogLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        """Send a debug-level log message."""
        self._log(LogLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        """Send an info-level log message."""
        self._log(LogLevel.INFO, msg)

    def warning(self, msg: str) -> None:
        """Send a warning-level log message."""
        self._log(LogLevel.WARNING, msg)

    def error(self, msg: str) -> None:
        """Send an error-level log message."""
        self._log(LogLevel.ERROR, msg)

    def shutdown(self) -> None:
        """Flushes any buffered messages and closes all handlers.

        Messages logged after shutdown are dropped.
        """
        self.flush()
        self._is_running = False
        for handler in self._handlers:
            handler.close()

    def is_running(self) -> bool:
        """Check if the logger is running."""
        return self._is_running

    def get_name(self) -> str:
        """Get the name of the logger."""
        return self._name

    def get_config(self) -> LoggerConfig:
        """Get the configuration of the logger."""
        return self._config
