from matchmaker.models.court import Court, Surface
from matchmaker.models.match import ConfigValidation, Match, MatchFormat, MatchGenerationConfig, MatchGenerationResult
from matchmaker.models.player import Gender, Player, PlusMinus

__all__ = [
    "Player",
    "Gender",
    "PlusMinus",
    "Court",
    "Surface",
    "Match",
    "MatchFormat",
    "MatchGenerationConfig",
    "MatchGenerationResult",
    "ConfigValidation",
]
