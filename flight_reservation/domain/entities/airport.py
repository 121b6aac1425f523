"""Airport domain entity."""
from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class Airport:
    """Domain entity representing an airport and the aircraft it accepts."""

    code: str
    name: str
    location: str
    allowed_aircraft: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        """Validate airport entity."""
        if not self.code:
            raise ValueError("code is required")
        # Accept any iterable of model names
        object.__setattr__(self, "allowed_aircraft", frozenset(self.allowed_aircraft))

    def allows(self, model: str) -> bool:
        """Check whether an aircraft model may operate at this airport."""
        return model in self.allowed_aircraft

    def __str__(self) -> str:
        return self.code
