"""
Player rotation — AB-smart mixing across sets.

The strength-sorted list is split into a top half A and a bottom half B.
For set s, A is rotated right by (s - 1) and B by 2 * (s - 1), then the two
are interleaved A0, B0, A1, B1, ... Consecutive pairs become teams and
consecutive teams become matches, so each set number yields a different
adjacency pattern while each half keeps its internal order modulo rotation.
"""

from typing import List, Sequence, Tuple, TypeVar

from matchmaker.models.player import Player

T = TypeVar("T")


def split_ab(items: Sequence[T]) -> Tuple[List[T], List[T]]:
    """A gets the larger half when the length is odd."""
    midpoint = (len(items) + 1) // 2
    return list(items[:midpoint]), list(items[midpoint:])


def rotate_right(items: Sequence[T], positions: int) -> List[T]:
    length = len(items)
    if length == 0:
        return []
    n = positions % length
    if n == 0:
        return list(items)
    return list(items[length - n:]) + list(items[:length - n])


def interleave_ab(group_a: Sequence[T], group_b: Sequence[T]) -> List[T]:
    """A0, B0, A1, B1, ...; the longer list's tail follows in order."""
    result: List[T] = []
    for i in range(max(len(group_a), len(group_b))):
        if i < len(group_a):
            result.append(group_a[i])
        if i < len(group_b):
            result.append(group_b[i])
    return result


def mix_ab_smart(items: Sequence[T], set_number: int) -> List[T]:
    """Per-set permutation of ``items``. Set 1 is the plain interleave of the halves."""
    if len(items) <= 1:
        return list(items)

    group_a, group_b = split_ab(items)
    group_a = rotate_right(group_a, set_number - 1)
    group_b = rotate_right(group_b, 2 * (set_number - 1))
    return interleave_ab(group_a, group_b)


def rotate_players_for_set(players: Sequence[Player], set_number: int) -> List[Player]:
    """Roster order for ``set_number``; match formation calls this when rotation is on."""
    return mix_ab_smart(players, set_number)


def group_into_teams(players: Sequence[T]) -> List[Tuple[T, T]]:
    """Consecutive pairs; an odd player out is dropped."""
    return [(players[i], players[i + 1]) for i in range(0, len(players) - 1, 2)]


def pair_teams_into_matches(teams: Sequence[Tuple[T, T]]) -> List[Tuple[Tuple[T, T], Tuple[T, T]]]:
    """Consecutive teams face each other; an odd team out is dropped."""
    return [(teams[i], teams[i + 1]) for i in range(0, len(teams) - 1, 2)]
