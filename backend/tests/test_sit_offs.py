"""
Tests for sit-off planning.
"""

from matchmaker.utils.sit_offs import (
    auto_select_sit_off_players,
    calculate_sit_offs,
    sit_off_message,
    sit_off_status,
)


def test_divisibility_sit_offs(make_roster):
    calc = calculate_sit_offs(make_roster(10), court_count=4)
    assert calc.divisibility_sit_offs == 2
    assert calc.capacity_sit_offs == 0
    assert calc.players_needed_to_sit_off == 2
    assert calc.courts_needed == 2


def test_capacity_sit_offs(make_roster):
    calc = calculate_sit_offs(make_roster(20), court_count=3)
    assert calc.capacity_sit_offs == 8
    assert calc.players_needed_to_sit_off == 8
    assert calc.courts_needed == 3


def test_resting_players_ignored_and_sitting_counted(make_roster, make_player):
    players = make_roster(8) + [make_player(is_resting=True), make_player(so=True, gender="F")]
    calc = calculate_sit_offs(players, court_count=4)
    assert calc.total_available_players == 9
    assert calc.active_players == 8
    assert calc.sit_off_players == 1
    assert calc.players_needed_to_sit_off == 1
    assert calc.is_balanced
    assert calc.male_count == 8
    assert calc.female_count == 0


def test_status(make_roster):
    assert sit_off_status(calculate_sit_offs(make_roster(8), 2)) == "good"
    assert sit_off_status(calculate_sit_offs(make_roster(9), 2)) == "warning"


def test_message(make_roster):
    message = sit_off_message(calculate_sit_offs(make_roster(9), 2))
    assert message == (
        "Courts available: 2, Courts needed: 2, Players to sit off: 1\n"
        "Total Men: 9, Total Women: 0, Total Players: 9"
    )


def test_auto_select_prefers_fresh_late_arrivals(make_player):
    early = make_player(arrival_order=1)
    late = make_player(arrival_order=5)
    sat_before = make_player(arrival_order=9, pso=True)
    resting = make_player(arrival_order=10, is_resting=True)
    players = [early, late, sat_before, resting]
    assert auto_select_sit_off_players(players, 2) == [late.id, early.id]
    assert auto_select_sit_off_players(players, 3) == [late.id, early.id, sat_before.id]
    assert auto_select_sit_off_players(players, 0) == []
