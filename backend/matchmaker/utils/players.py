"""
Roster filtering and sit-out selection helpers.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from matchmaker.models.match import MatchFormat
from matchmaker.models.player import Gender, Player

PLAYERS_PER_MATCH = 4


def is_available_for_set(player: Player, set_number: int) -> bool:
    """
    A player can be drawn for a set when:
    - name, grade and gender are all populated
    - they are not resting and not sitting out
    - they have not marked this set unavailable
    """
    if not player.name or not player.grade or not player.gender:
        return False
    if player.is_resting or player.so:
        return False
    return not player.is_unavailable_for(set_number)


def available_players_for_set(players: Iterable[Player], set_number: int) -> List[Player]:
    return [p for p in players if is_available_for_set(p, set_number)]


def filter_players_by_gender(players: Iterable[Player], gender: Optional[Gender]) -> List[Player]:
    if gender is None:
        return list(players)
    return [p for p in players if p.gender == gender]


def split_players_by_gender(players: Sequence[Player]) -> Tuple[List[Player], List[Player]]:
    """Return (male, female), each in input order."""
    return filter_players_by_gender(players, Gender.M), filter_players_by_gender(players, Gender.F)


def sort_by_arrival_order(players: Iterable[Player]) -> List[Player]:
    return sorted(players, key=lambda p: p.arrival_order)


def calculate_sit_out_count(total_players: int, available_courts: int) -> int:
    return max(0, total_players - available_courts * PLAYERS_PER_MATCH)


def select_players_to_sit_out(players: Sequence[Player], count: int) -> List[Player]:
    """Players who have not sat out yet go first, each group in arrival order."""
    if count <= 0:
        return []
    not_sat_out = sort_by_arrival_order(p for p in players if not p.pso)
    sat_out = sort_by_arrival_order(p for p in players if p.pso)
    return (not_sat_out + sat_out)[:count]


def has_enough_players(
    players: Sequence[Player], match_format: MatchFormat, courts_count: int
) -> Tuple[bool, Optional[str]]:
    """Check the roster can fill every court. Returns (valid, message)."""
    if match_format == MatchFormat.MIXED:
        male, female = split_players_by_gender(players)
        needed = courts_count * 2
        if len(male) < needed:
            return False, f"Need {needed} male players, have {len(male)}"
        if len(female) < needed:
            return False, f"Need {needed} female players, have {len(female)}"
        return True, None

    total_needed = courts_count * PLAYERS_PER_MATCH
    if len(players) < total_needed:
        return False, f"Need {total_needed} players, have {len(players)}"
    return True, None
