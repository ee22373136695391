"""Uniform insert/contains/remove surface over heterogeneous containers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import StrEnum


class DuplicatePolicy(StrEnum):
    """What `insert` does with a token the container already holds.

    SKIP leaves the container unchanged and reports False. ALLOW stores the
    token again and reports True.
    """

    SKIP = "skip"
    ALLOW = "allow"


class ContainerAdapter(ABC):
    """Base adapter giving every benchmarked structure the same calling convention.

    Subclasses wrap one concrete structure and implement its primitives;
    the duplicate policy is applied here so that it is fixed per instance.

    Subclasses must implement:
        _push(token): Store a token using the structure's native insertion.
        contains(token): Membership test.
        remove(token): Remove one occurrence by value.
        __iter__(), __len__(), clear().

    Args:
        duplicate_policy: Policy for inserting a token that is already present.

    Raises:
        ValueError: If the policy is not supported by this adapter.
    """

    kind: str = ""
    supported_policies: frozenset[DuplicatePolicy] = frozenset(DuplicatePolicy)

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.ALLOW) -> None:
        policy = DuplicatePolicy(duplicate_policy)
        if policy not in self.supported_policies:
            raise ValueError(
                f"Invalid duplicate policy for {type(self).__name__}; expected one of "
                f"{sorted(p.value for p in self.supported_policies)} but got {policy.value!r}"
            )
        self._duplicate_policy = policy

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        """Duplicate policy fixed at construction."""
        return self._duplicate_policy

    def insert(self, token: str) -> bool:
        """Insert a token.

        Returns:
            False if the token was already present under the SKIP policy
            (nothing stored), True otherwise.
        """
        if self._duplicate_policy is DuplicatePolicy.SKIP and self.contains(token):
            return False
        self._push(token)
        return True

    @abstractmethod
    def _push(self, token: str) -> None:
        """Store a token unconditionally."""

    @abstractmethod
    def contains(self, token: str) -> bool:
        """Check whether the token is stored."""

    @abstractmethod
    def remove(self, token: str) -> bool:
        """Remove one occurrence of the token.

        Returns:
            True if a token was removed, False if it was absent.
        """

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Iterate tokens in storage order."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of stored tokens, duplicates included."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every token."""

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and self.contains(token)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind!r}, "
            f"policy={self._duplicate_policy.value!r}, size={len(self)})"
        )
