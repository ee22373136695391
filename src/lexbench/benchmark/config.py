from typing import Self

import msgspec
from msgspec import Struct

from lexbench.containers.base import DuplicatePolicy
from lexbench.containers.registry import ContainerKind
from lexbench.lexeme.category import LexemeCategory
from lexbench.statistics import Z_95


def _builtin_kinds() -> list[str]:
    return [kind.value for kind in ContainerKind]


class BenchmarkConfig(Struct):
    """Configuration for one benchmark session.

    Kind names are resolved against the engine's registry when the engine is
    built, so kinds registered at runtime are accepted here.
    """

    containers: list[str] = msgspec.field(default_factory=_builtin_kinds)
    duplicate_policies: dict[str, DuplicatePolicy] = {}
    repeat_count: int = 10
    seed: int | None = None
    z: float = Z_95
    category: LexemeCategory | None = None

    def __post_init__(self):
        """Validate container selection, repeat count and z."""
        if not self.containers:
            raise ValueError("Invalid containers; expected at least one container kind")
        if len(set(self.containers)) != len(self.containers):
            raise ValueError(
                f"Invalid containers; expected unique kinds but got {self.containers}"
            )
        unknown = set(self.duplicate_policies) - set(self.containers)
        if unknown:
            raise ValueError(
                f"Invalid duplicate_policies; kinds {sorted(unknown)} are not in containers"
            )
        if self.repeat_count < 0:
            raise ValueError(
                f"Invalid repeat_count; expected >=0 but got {self.repeat_count}"
            )
        if not self.z > 0.0:
            raise ValueError(f"Invalid z; expected >0 but got {self.z}")

    @classmethod
    def default(cls) -> Self:
        """Return all built-in containers with their default policies, 10 cycles."""
        return cls()

    def policy_for(self, kind: str) -> DuplicatePolicy | None:
        """Duplicate policy override for `kind`, None to use the registry default."""
        return self.duplicate_policies.get(kind)
