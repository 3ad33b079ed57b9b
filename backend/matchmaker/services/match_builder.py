"""
Match formation — turn an eligible roster into unassigned 2v2 matches.

Same-Sex: each gender sorted by strength and consumed in blocks of four
(strongest pair vs next pair). Remainders from both genders are paired
into mixed matches when there are at least two of each.

Mixed: each gender sorted by strength and bucketed by grade. Grades are
processed highest first; each tier forms (man, woman) vs (man, woman)
matches and passes its remainder on to one final mixed pass.

Formation never mutates its inputs and leaves ``court`` unset.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from matchmaker.models.match import Match, MatchFormat
from matchmaker.models.player import Gender, Player
from matchmaker.services.rotation import group_into_teams, pair_teams_into_matches, rotate_players_for_set
from matchmaker.utils.grades import group_players_by_grade, sort_players_by_strength
from matchmaker.utils.players import PLAYERS_PER_MATCH, split_players_by_gender

MIXED_LABEL = "Mixed Doubles"


def same_sex_label(gender: Optional[Gender]) -> str:
    return "Same-Sex Doubles (Men)" if gender == Gender.M else "Same-Sex Doubles (Women)"


@dataclass
class SameSexFormation:
    matches: List[Match] = field(default_factory=list)
    leftovers: List[Player] = field(default_factory=list)


@dataclass
class MixedFormation:
    matches: List[Match] = field(default_factory=list)
    leftover_men: List[Player] = field(default_factory=list)
    leftover_women: List[Player] = field(default_factory=list)


def create_same_sex_matches_from_list(players: Sequence[Player]) -> SameSexFormation:
    """Blocks of four in list order; a trailing partial block is returned as leftovers."""
    used = len(players) - len(players) % PLAYERS_PER_MATCH
    matches = [
        Match(
            team1=team1,
            team2=team2,
            format=MatchFormat.SAME_SEX,
            label=same_sex_label(team1[0].gender),
        )
        for team1, team2 in pair_teams_into_matches(group_into_teams(players[:used]))
    ]
    return SameSexFormation(matches=matches, leftovers=list(players[used:]))


def create_mixed_matches_from_list(men: Sequence[Player], women: Sequence[Player]) -> MixedFormation:
    """
    Pair men[2i]/women[2i] against men[2i+1]/women[2i+1].

    As many matches as min(len(men) // 2, len(women) // 2); the rest of each
    list comes back as leftovers.
    """
    pairs = min(len(men) // 2, len(women) // 2)
    matches = [
        Match(
            team1=(men[2 * i], women[2 * i]),
            team2=(men[2 * i + 1], women[2 * i + 1]),
            format=MatchFormat.MIXED,
            label=MIXED_LABEL,
        )
        for i in range(pairs)
    ]
    return MixedFormation(
        matches=matches,
        leftover_men=list(men[pairs * 2:]),
        leftover_women=list(women[pairs * 2:]),
    )


def _ordered(players: Sequence[Player], set_number: int, rotate: bool) -> List[Player]:
    ordered = sort_players_by_strength(players)
    if rotate:
        ordered = rotate_players_for_set(ordered, set_number)
    return ordered


def generate_same_sex_format(players: Sequence[Player], set_number: int, rotate: bool = False) -> List[Match]:
    male, female = split_players_by_gender(players)

    male_result = create_same_sex_matches_from_list(_ordered(male, set_number, rotate))
    female_result = create_same_sex_matches_from_list(_ordered(female, set_number, rotate))
    matches = male_result.matches + female_result.matches

    # Leftovers that cannot make a mixed pair simply sit this set out
    if len(male_result.leftovers) >= 2 and len(female_result.leftovers) >= 2:
        mixed = create_mixed_matches_from_list(male_result.leftovers, female_result.leftovers)
        matches.extend(mixed.matches)

    return matches


def generate_mixed_format(players: Sequence[Player], set_number: int, rotate: bool = False) -> List[Match]:
    male, female = split_players_by_gender(players)
    male_by_grade = group_players_by_grade(sort_players_by_strength(male))
    female_by_grade = group_players_by_grade(sort_players_by_strength(female))

    matches: List[Match] = []
    leftover_men: List[Player] = []
    leftover_women: List[Player] = []

    for grade in sorted(set(male_by_grade) | set(female_by_grade), reverse=True):
        tier_men = male_by_grade.get(grade, [])
        tier_women = female_by_grade.get(grade, [])
        if rotate:
            tier_men = rotate_players_for_set(tier_men, set_number)
            tier_women = rotate_players_for_set(tier_women, set_number)

        result = create_mixed_matches_from_list(tier_men, tier_women)
        matches.extend(result.matches)
        leftover_men.extend(result.leftover_men)
        leftover_women.extend(result.leftover_women)

    if len(leftover_men) >= 2 and len(leftover_women) >= 2:
        matches.extend(create_mixed_matches_from_list(leftover_men, leftover_women).matches)

    return matches
