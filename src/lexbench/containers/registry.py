"""Registry of container kinds the benchmark engine can instantiate.

The set of kinds is open: registering a new adapter makes it available to
the engine and the CLI by name, with no change to either.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from lexbench.containers.adapters import (
    DequeAdapter,
    HashSetAdapter,
    LinkedListAdapter,
    QueueAdapter,
    StackAdapter,
)
from lexbench.containers.base import ContainerAdapter, DuplicatePolicy


class ContainerKind(StrEnum):
    """Built-in container kinds."""

    LINKED_LIST = "LINKED_LIST"
    DEQUE = "DEQUE"
    QUEUE = "QUEUE"
    STACK = "STACK"
    HASH_SET = "HASH_SET"


AdapterFactory = Callable[[DuplicatePolicy], ContainerAdapter]


@dataclass(frozen=True)
class RegistryEntry:
    """A registered container kind.

    Args:
        kind: Name the kind is looked up by.
        factory: Callable building an adapter for a given duplicate policy.
        default_policy: Policy used when the caller does not pick one.
    """

    kind: str
    factory: AdapterFactory
    default_policy: DuplicatePolicy


class ContainerRegistry:
    """Maps container kind names to adapter factories."""

    def __init__(self) -> None:
        self._entries: dict[str, RegistryEntry] = {}

    def register(
        self,
        kind: str,
        default_policy: DuplicatePolicy = DuplicatePolicy.ALLOW,
    ) -> Callable[[AdapterFactory], AdapterFactory]:
        """Register an adapter factory under `kind`, usable as a decorator.

        Raises:
            ValueError: If `kind` is empty or already registered.
        """
        name = str(kind)
        if not name:
            raise ValueError("Container kind name cannot be empty")
        if name in self._entries:
            raise ValueError(f"Container kind {name!r} is already registered")

        def _inner(factory: AdapterFactory) -> AdapterFactory:
            self._entries[name] = RegistryEntry(name, factory, DuplicatePolicy(default_policy))
            return factory

        return _inner

    def unregister(self, kind: str) -> None:
        """Remove a registered kind.

        Raises:
            KeyError: If the kind is unknown.
        """
        del self._entries[self.get(kind).kind]

    def get(self, kind: str) -> RegistryEntry:
        """Look up a registered kind.

        Raises:
            KeyError: If the kind is unknown.
        """
        try:
            return self._entries[str(kind)]
        except KeyError:
            raise KeyError(
                f"Unknown container kind {str(kind)!r}; expected one of {self.kinds()}"
            ) from None

    def create(self, kind: str, policy: DuplicatePolicy | None = None) -> ContainerAdapter:
        """Build a fresh adapter for `kind`.

        Args:
            kind: Registered kind name.
            policy: Duplicate policy, defaults to the kind's registered default.

        Raises:
            KeyError: If the kind is unknown.
            ValueError: If the adapter does not support the policy.
        """
        entry = self.get(kind)
        adapter = entry.factory(policy if policy is not None else entry.default_policy)
        adapter.kind = entry.kind
        return adapter

    def default_policy(self, kind: str) -> DuplicatePolicy:
        """Registered default duplicate policy for `kind`."""
        return self.get(kind).default_policy

    def kinds(self) -> list[str]:
        """Registered kind names, in registration order."""
        return list(self._entries)

    def __contains__(self, kind: object) -> bool:
        return str(kind) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def default_registry() -> ContainerRegistry:
    """Build a registry holding the built-in kinds."""
    reg = ContainerRegistry()
    reg.register(ContainerKind.LINKED_LIST, DuplicatePolicy.ALLOW)(LinkedListAdapter)
    reg.register(ContainerKind.DEQUE, DuplicatePolicy.ALLOW)(DequeAdapter)
    reg.register(ContainerKind.QUEUE, DuplicatePolicy.SKIP)(QueueAdapter)
    reg.register(ContainerKind.STACK, DuplicatePolicy.SKIP)(StackAdapter)
    reg.register(ContainerKind.HASH_SET, DuplicatePolicy.SKIP)(HashSetAdapter)
    return reg


registry = default_registry()
