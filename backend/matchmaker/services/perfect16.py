"""
Perfect 16 — fixed five-set schedule for 16 same-gender, same-grade players.

Player indices 0..15 are laid out on a 4x4 grid (row = i // 4, col = i % 4).
Set 1 groups rows, set 2 groups columns and sets 3-5 group the three
families of diagonals, so every pair of players shares a court exactly once
across the five sets, either as partners or as opponents.

Each group [a, b, c, d] plays as (a, b) vs (c, d).
"""

import logging
from typing import Dict, List, Optional, Sequence

from matchmaker.models.match import Match, MatchFormat
from matchmaker.models.player import Gender, Player

logger = logging.getLogger(__name__)

PERFECT16_PLAYER_COUNT = 16
PERFECT16_COURT_COUNT = 4

PERFECT16_SCHEDULES: Dict[int, List[List[int]]] = {
    1: [
        [0, 1, 2, 3],
        [4, 5, 6, 7],
        [8, 9, 10, 11],
        [12, 13, 14, 15],
    ],
    2: [
        [0, 4, 8, 12],
        [1, 5, 9, 13],
        [2, 6, 10, 14],
        [3, 7, 11, 15],
    ],
    3: [
        [0, 5, 10, 15],
        [1, 4, 11, 14],
        [2, 7, 8, 13],
        [3, 6, 9, 12],
    ],
    4: [
        [0, 6, 11, 13],
        [1, 7, 10, 12],
        [2, 4, 9, 15],
        [3, 5, 8, 14],
    ],
    5: [
        [0, 7, 9, 14],
        [1, 6, 8, 15],
        [2, 5, 11, 12],
        [3, 4, 10, 13],
    ],
}


def perfect16_schedule(set_number: int) -> Optional[List[List[int]]]:
    return PERFECT16_SCHEDULES.get(set_number)


def is_perfect16_set_available(set_number: int) -> bool:
    return set_number in PERFECT16_SCHEDULES


def detect_perfect16_scenario(players: Sequence[Player], has_manual_matches: bool) -> bool:
    """Exactly 16 players, one gender, one grade, nothing pinned manually."""
    if has_manual_matches:
        return False
    if len(players) != PERFECT16_PLAYER_COUNT:
        return False
    if len({p.gender for p in players}) != 1:
        return False
    return len({p.grade for p in players}) == 1


def build_perfect16_matches(
    players: Sequence[Player], court_names: Sequence[str], set_number: int
) -> Optional[List[Match]]:
    """
    Build the four Perfect 16 matches for ``set_number``.

    ``players`` must already be in strength order; schedule indices refer to
    positions in that list. Matches go on the first four courts in order.

    Returns None when the schedule cannot be used (wrong player count, fewer
    than four courts, or no table entry for the set).
    """
    if len(players) != PERFECT16_PLAYER_COUNT:
        return None
    if len(court_names) < PERFECT16_COURT_COUNT:
        return None
    schedule = perfect16_schedule(set_number)
    if schedule is None:
        return None

    gender = players[0].gender
    label = "Same-Sex Doubles (Men)" if gender == Gender.M else "Same-Sex Doubles (Women)"

    matches: List[Match] = []
    for court_name, indices in zip(court_names, schedule):
        p1, p2, p3, p4 = (players[i] for i in indices)
        matches.append(
            Match(
                court=court_name,
                team1=(p1, p2),
                team2=(p3, p4),
                format=MatchFormat.SAME_SEX,
                label=label,
                is_manual=False,
                note=f"Perfect 16 Set {set_number}",
            )
        )

    logger.debug("Perfect 16 set %d: %d matches on %s", set_number, len(matches), list(court_names[:4]))
    return matches
