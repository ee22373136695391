"""Container adapters benchmarked by the engine."""

from .adapters import (
    DequeAdapter as DequeAdapter,
)
from .adapters import (
    HashSetAdapter as HashSetAdapter,
)
from .adapters import (
    LinkedListAdapter as LinkedListAdapter,
)
from .adapters import (
    QueueAdapter as QueueAdapter,
)
from .adapters import (
    StackAdapter as StackAdapter,
)
from .base import (
    ContainerAdapter as ContainerAdapter,
)
from .base import (
    DuplicatePolicy as DuplicatePolicy,
)
from .linked_list import (
    DoublyLinkedList as DoublyLinkedList,
)
from .registry import (
    ContainerKind as ContainerKind,
)
from .registry import (
    ContainerRegistry as ContainerRegistry,
)
from .registry import (
    default_registry as default_registry,
)
from .ringbuffer import (
    RingBufferQueue as RingBufferQueue,
)
