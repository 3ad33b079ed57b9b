"""
Competitiveness optimization — repair partnerships with a wide grade gap.

Runs after balancing. A match is uncompetitive when either team's partners
are PARTNERSHIP_GAP_THRESHOLD or more grades apart.

Uncompetitive matches are taken in consecutive pairs: their eight players
are pooled, sorted by strength and dealt back as the four strongest in the
first match's slot (1st+2nd vs 3rd+4th) and the four weakest in the
second's (5th+6th vs 7th+8th). An odd one out is repartnered on its own as
strongest+weakest vs 2nd+3rd. Other matches pass through untouched.
"""

from typing import List, Sequence, Tuple

from matchmaker.config import PARTNERSHIP_GAP_THRESHOLD
from matchmaker.models.match import Match
from matchmaker.utils.grades import calculate_partnership_gap, sort_players_by_strength


def is_uncompetitive_match(match: Match) -> bool:
    return (
        calculate_partnership_gap(match.team1) >= PARTNERSHIP_GAP_THRESHOLD
        or calculate_partnership_gap(match.team2) >= PARTNERSHIP_GAP_THRESHOLD
    )


def redistribute_match_pair(first: Match, second: Match) -> Tuple[Match, Match]:
    """Strongest four into ``first``, weakest four into ``second``."""
    pool = sort_players_by_strength([*first.players, *second.players])
    strong = first.model_copy(update={"team1": (pool[0], pool[1]), "team2": (pool[2], pool[3])})
    weak = second.model_copy(update={"team1": (pool[4], pool[5]), "team2": (pool[6], pool[7])})
    return strong, weak


def repartner_single_match(match: Match) -> Match:
    ranked = sort_players_by_strength(match.players)
    return match.model_copy(update={"team1": (ranked[0], ranked[3]), "team2": (ranked[1], ranked[2])})


def optimize_competitiveness(matches: Sequence[Match]) -> List[Match]:
    result = list(matches)
    flagged = [i for i, m in enumerate(result) if is_uncompetitive_match(m)]

    for k in range(0, len(flagged) - 1, 2):
        first, second = flagged[k], flagged[k + 1]
        result[first], result[second] = redistribute_match_pair(result[first], result[second])

    if len(flagged) % 2 == 1:
        last = flagged[-1]
        result[last] = repartner_single_match(result[last])

    return result
