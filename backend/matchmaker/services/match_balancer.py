"""
Match balancing — one-swap repair of lopsided team totals.

A match whose team strengths differ by BALANCE_GAP_THRESHOLD or more tries
three single-player swaps between the teams and keeps the one with the
smallest remaining gap. Swaps that leave two men against two women are
never taken. If nothing beats the current gap the match is returned as is.
"""

from typing import List, Sequence, Tuple

from matchmaker.config import BALANCE_GAP_THRESHOLD
from matchmaker.models.match import Match
from matchmaker.models.player import Gender, Player
from matchmaker.utils.grades import calculate_team_strength

# (team1 index, team2 index)
SWAP_CANDIDATES: Tuple[Tuple[int, int], ...] = ((0, 0), (0, 1), (1, 0))


def _male_count(team: Sequence[Player]) -> int:
    return sum(1 for p in team if p.gender == Gender.M)


def is_prohibited_gender_match(team1: Sequence[Player], team2: Sequence[Player]) -> bool:
    """Two men on one side and none on the other."""
    males1 = _male_count(team1)
    males2 = _male_count(team2)
    return (males1 == 2 and males2 == 0) or (males1 == 0 and males2 == 2)


def strength_gap(team1: Sequence[Player], team2: Sequence[Player]) -> float:
    return abs(calculate_team_strength(team1) - calculate_team_strength(team2))


def balance_match(match: Match) -> Match:
    best_gap = strength_gap(match.team1, match.team2)
    if best_gap < BALANCE_GAP_THRESHOLD:
        return match

    best = match
    for i, j in SWAP_CANDIDATES:
        team1 = list(match.team1)
        team2 = list(match.team2)
        team1[i], team2[j] = team2[j], team1[i]

        if is_prohibited_gender_match(team1, team2):
            continue

        gap = strength_gap(team1, team2)
        if gap < best_gap:
            best_gap = gap
            best = match.model_copy(update={"team1": tuple(team1), "team2": tuple(team2)})

    return best


def balance_all_matches(matches: Sequence[Match]) -> List[Match]:
    return [balance_match(m) for m in matches]
