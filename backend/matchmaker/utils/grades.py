"""
Grade and strength model.

Single source of truth for "who is stronger". Every sort in the engine goes
through ``strength_key`` so formation, balancing and optimization agree on
ordering.

Internal grades run 1..5 (higher = stronger); the club prints them as
3A, 3, 2B, 2A, 2.
"""

from typing import Dict, Iterable, List, Sequence, Tuple

from matchmaker.models.player import Player

GRADE_DISPLAY: Dict[int, str] = {
    5: "2",
    4: "2A",
    3: "2B",
    2: "3",
    1: "3A",
}

GRADE_VALUE: Dict[str, int] = {label: grade for grade, label in GRADE_DISPLAY.items()}


def translate_grade(grade: int) -> str:
    """Internal grade number -> club display label."""
    if grade not in GRADE_DISPLAY:
        raise ValueError(f"grade must be 1..5, got {grade}")
    return GRADE_DISPLAY[grade]


def reverse_translate_grade(display: str) -> int:
    """Club display label -> internal grade. Unknown labels map to the lowest grade."""
    return GRADE_VALUE.get(display.strip().upper(), 1)


def strength_key(player: Player) -> Tuple[int, int, int]:
    """Sort key, strongest first.

    Order: grade DESC, plus/minus DESC, arrival_order ASC. Remaining ties keep
    input order (sorted() is stable).
    """
    return (-(player.grade or 0), -player.plus_minus.ordinal, player.arrival_order)


def sort_players_by_strength(players: Iterable[Player]) -> List[Player]:
    return sorted(players, key=strength_key)


def group_players_by_grade(players: Iterable[Player]) -> Dict[int, List[Player]]:
    """Bucket players by exact grade, preserving their order inside each bucket."""
    by_grade: Dict[int, List[Player]] = {}
    for player in players:
        by_grade.setdefault(player.grade, []).append(player)
    return by_grade


def player_strength(player: Player) -> float:
    return (player.grade or 0) + player.plus_minus.adjustment


def calculate_team_strength(team: Sequence[Player]) -> float:
    """Sum of grades, each nudged by +/-0.5 for its modifier."""
    return sum(player_strength(p) for p in team)


def calculate_partnership_gap(team: Sequence[Player]) -> int:
    """Grade difference between the two partners (modifiers ignored)."""
    if len(team) != 2:
        return 0
    return abs((team[0].grade or 0) - (team[1].grade or 0))


def grade_difference(grade1: int, grade2: int) -> int:
    return abs(grade1 - grade2)


def has_large_grade_gap(grade1: int, grade2: int) -> bool:
    return grade_difference(grade1, grade2) > 1


def team_average_grade(players: Sequence[Player]) -> float:
    if not players:
        return 0.0
    return sum(p.grade or 0 for p in players) / len(players)


def is_playing_down(player_grade: int, partner_grade: int) -> bool:
    """True when a player is partnered with someone of a lower grade."""
    return player_grade > partner_grade
