"""
Sit-off planning.

Works out how many players must sit off a set, either because the count is
not a multiple of four or because there are more players than court places,
and proposes who should sit. Advisory only: match generation does not call
into this module.
"""

from dataclasses import dataclass
from typing import List, Sequence

from matchmaker.models.player import Gender, Player
from matchmaker.utils.players import PLAYERS_PER_MATCH


@dataclass
class SitOffCalculation:
    total_available_players: int
    active_players: int
    sit_off_players: int  # already flagged as sitting off
    courts_needed: int
    courts_available: int
    players_needed_to_sit_off: int
    divisibility_sit_offs: int
    capacity_sit_offs: int
    is_balanced: bool
    male_count: int
    female_count: int


def calculate_sit_offs(players: Sequence[Player], court_count: int) -> SitOffCalculation:
    available = [p for p in players if not p.is_resting]
    active = [p for p in available if not p.so]
    already_sitting = len(available) - len(active)

    total = len(available)
    divisibility = total % PLAYERS_PER_MATCH
    capacity = max(0, total - court_count * PLAYERS_PER_MATCH)
    needed = max(divisibility, capacity)

    return SitOffCalculation(
        total_available_players=total,
        active_players=len(active),
        sit_off_players=already_sitting,
        courts_needed=(total - needed) // PLAYERS_PER_MATCH,
        courts_available=court_count,
        players_needed_to_sit_off=needed,
        divisibility_sit_offs=divisibility,
        capacity_sit_offs=capacity,
        is_balanced=already_sitting == needed,
        male_count=sum(1 for p in active if p.gender == Gender.M),
        female_count=sum(1 for p in active if p.gender == Gender.F),
    )


def auto_select_sit_off_players(players: Sequence[Player], players_needed_to_sit_off: int) -> List[str]:
    """
    Pick player ids to sit off.

    Priority: players who have not sat off yet (pso False), then later
    arrivals before earlier ones.
    """
    if players_needed_to_sit_off <= 0:
        return []
    candidates = [p for p in players if not p.is_resting and not p.so]
    candidates.sort(key=lambda p: (p.pso, -p.arrival_order))
    return [p.id for p in candidates[:players_needed_to_sit_off]]


def sit_off_message(calc: SitOffCalculation) -> str:
    return (
        f"Courts available: {calc.courts_available}, Courts needed: {calc.courts_needed}, "
        f"Players to sit off: {calc.players_needed_to_sit_off}\n"
        f"Total Men: {calc.male_count}, Total Women: {calc.female_count}, "
        f"Total Players: {calc.active_players}"
    )


def sit_off_status(calc: SitOffCalculation) -> str:
    if calc.players_needed_to_sit_off == 0 or calc.is_balanced:
        return "good"
    return "warning"
