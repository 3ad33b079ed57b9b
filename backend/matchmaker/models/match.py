from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from matchmaker.models.court import Court
from matchmaker.models.player import Player
from matchmaker.utils.court_names import parse_court_names


class MatchFormat(str, Enum):
    SAME_SEX = "Same-Sex"
    MIXED = "Mixed"


class Match(BaseModel):
    """One doubles match: two teams of two.

    ``court`` stays None until the orchestrator assigns one. ``label`` is a
    display annotation only; code branches on ``format``.
    """

    model_config = ConfigDict(frozen=True)

    court: Optional[str] = None
    team1: Tuple[Player, Player]
    team2: Tuple[Player, Player]
    format: MatchFormat
    label: Optional[str] = None
    is_manual: bool = False
    note: Optional[str] = None

    @property
    def players(self) -> Tuple[Player, Player, Player, Player]:
        return (*self.team1, *self.team2)

    @property
    def player_ids(self) -> List[str]:
        return [p.id for p in self.players]


class MatchGenerationConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    players: List[Player]
    courts: List[Court]
    set_number: int
    format: MatchFormat
    manual_matches: List[Match] = Field(default_factory=list)
    rotate: bool = False  # apply per-set AB mixing before forming matches

    @field_validator("courts", mode="before")
    @classmethod
    def _parse_courts(cls, value: Any) -> Any:
        # Accept "1,5,6" or ["1", "5"] as well as Court values
        if value is None or isinstance(value, str):
            return [{"name": name} for name in parse_court_names(value)]
        return value


class MatchGenerationResult(BaseModel):
    matches: List[Match]
    sit_out_players: List[Player] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class ConfigValidation(BaseModel):
    valid: bool
    errors: List[str]
