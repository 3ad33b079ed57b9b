"""
Court helpers that need the models: surface lookup and no-hard-court filtering.

Name parsing and ordering live in ``court_names``.
"""
from typing import List, Sequence

from matchmaker.models.court import Court, Surface
from matchmaker.models.player import Player
from matchmaker.utils.court_names import is_hard_court


def court_surface(court_name: str) -> Surface:
    return Surface.for_court_name(court_name)


def can_player_play_on_court(player: Player, court_name: str) -> bool:
    if not player.nhc:
        return True
    return not is_hard_court(court_name)


def courts_for_players(courts: Sequence[Court], players: Sequence[Player]) -> List[Court]:
    """Drop hard courts when any of the players has asked to avoid them."""
    if not any(p.nhc for p in players):
        return list(courts)
    return [c for c in courts if c.surface_type != Surface.HARD]
