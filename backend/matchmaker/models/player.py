from enum import Enum
from typing import Any, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Gender(str, Enum):
    M = "M"
    F = "F"


class PlusMinus(str, Enum):
    """Fine-grained strength modifier within a grade tier."""

    STRONGER = "+"
    NEUTRAL = ""
    WEAKER = "-"

    @classmethod
    def parse(cls, value: Any) -> "PlusMinus":
        """Map raw input onto the enum; anything unrecognized is NEUTRAL."""
        if isinstance(value, cls):
            return value
        if value == "+":
            return cls.STRONGER
        if value == "-":
            return cls.WEAKER
        return cls.NEUTRAL

    @property
    def ordinal(self) -> int:
        if self is PlusMinus.STRONGER:
            return 3
        if self is PlusMinus.WEAKER:
            return 1
        return 2

    @property
    def adjustment(self) -> float:
        if self is PlusMinus.STRONGER:
            return 0.5
        if self is PlusMinus.WEAKER:
            return -0.5
        return 0.0


class Player(BaseModel):
    """A player registered for one event, with per-session availability flags."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: Optional[str] = None
    grade: Optional[int] = Field(default=None, ge=1, le=5)  # 5 = strongest tier
    gender: Optional[Gender] = None
    plus_minus: PlusMinus = PlusMinus.NEUTRAL
    nhc: bool = False  # no hard courts
    arrival_order: int = 0
    is_resting: bool = False
    unavailable_sets: FrozenSet[int] = frozenset()
    pso: bool = False  # previously sat out
    so: bool = False  # sitting out the current set

    @field_validator("name", "grade", "gender", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        # Unset roster fields arrive as "" or 0; the eligibility filter drops them
        if value == "" or value == 0:
            return None
        return value

    @field_validator("plus_minus", mode="before")
    @classmethod
    def _parse_plus_minus(cls, value: Any) -> PlusMinus:
        return PlusMinus.parse(value)

    @field_validator("unavailable_sets", mode="before")
    @classmethod
    def _parse_unavailable_sets(cls, value: Any) -> FrozenSet[int]:
        # Storage rows carry {"set1": true, ..., "set6": false}
        if value is None:
            return frozenset()
        if isinstance(value, dict):
            sets = set()
            for key, flagged in value.items():
                if flagged and str(key).startswith("set"):
                    sets.add(int(str(key)[3:]))
            return frozenset(sets)
        return frozenset(int(s) for s in value)

    def is_unavailable_for(self, set_number: int) -> bool:
        return set_number in self.unavailable_sets
