from lexbench.logging.handlers.base import BaseLogHandler


class MemoryLogHandler(BaseLogHandler):
    """
    A log handler that keeps every pushed buffer in memory.

    Useful when embedding the harness, and for asserting on log output.
    """

    def __init__(self) -> None:
        super().__init__()
        self.buffers: list[tuple[str, ...]] = []

    @property
    def messages(self) -> list[str]:
        """All pushed messages, flattened in push order."""
        return [msg for buffer in self.buffers for msg in buffer]

    def push(self, buffer) -> None:
        self.buffers.append(tuple(buffer))

    def clear(self) -> None:
        self.buffers.clear()
