"""No-fly registry value object."""
from dataclasses import dataclass, field
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class NoFlyRegistry:
    """Immutable denylist of names barred from booking."""

    names: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "names", frozenset(self.names))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "NoFlyRegistry":
        return cls(frozenset(name.strip() for name in names if name and name.strip()))

    def contains(self, name: str) -> bool:
        return name in self.names

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __len__(self) -> int:
        return len(self.names)
