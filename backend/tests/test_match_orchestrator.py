"""
End-to-end tests for generate_matches and validate_match_config.
"""

from typing import Any, List, Sequence

import pytest

from matchmaker import generate_matches, validate_match_config
from matchmaker.models import (
    Court,
    Gender,
    Match,
    MatchFormat,
    MatchGenerationConfig,
    MatchGenerationResult,
    Player,
    PlusMinus,
)
from matchmaker.services.match_orchestrator import NOT_ENOUGH_PLAYERS_WARNING, assign_courts


def _config(
    players: List[Player],
    courts: Any,
    set_number: int = 1,
    fmt: MatchFormat = MatchFormat.SAME_SEX,
    **kwargs,
) -> MatchGenerationConfig:
    return MatchGenerationConfig(players=players, courts=courts, set_number=set_number, format=fmt, **kwargs)


def _generated(result: MatchGenerationResult) -> List[Match]:
    return [m for m in result.matches if not m.is_manual]


def _assert_no_duplicate_players(matches: Sequence[Match]) -> None:
    ids = [pid for m in matches for pid in m.player_ids]
    assert len(ids) == len(set(ids))


# ============================================================================
# Perfect 16
# ============================================================================


class TestPerfect16Path:
    """Sixteen same-grade, same-gender players use the fixed schedule for sets 1-5."""

    def test_sixteen_men_set_one(self, make_roster, courts):
        players = make_roster(16, grade=3)
        result = generate_matches(_config(players, courts))

        assert len(result.matches) == 4
        assert result.warnings == []
        assert [m.court for m in result.matches] == ["1", "2", "3", "4"]
        for i, match in enumerate(result.matches):
            assert match.player_ids == [p.id for p in players[4 * i:4 * i + 4]]
            assert match.note == "Perfect 16 Set 1"

    def test_uses_strength_order_for_indices(self, make_roster, courts):
        players = make_roster(16, grade=3)
        stronger = players[15].model_copy(update={"plus_minus": PlusMinus.STRONGER})
        roster = players[:15] + [stronger]
        result = generate_matches(_config(roster, courts))
        assert result.matches[0].team1[0].id == stronger.id

    def test_set_six_falls_back(self, make_roster, courts):
        result = generate_matches(_config(make_roster(16), courts, set_number=6))
        assert len(result.matches) == 4
        assert all(m.note is None for m in result.matches)

    def test_too_few_courts_falls_back(self, make_roster):
        result = generate_matches(_config(make_roster(16), [Court(name="1"), Court(name="2")]))
        assert len(result.matches) == 4
        assert all(m.note is None for m in result.matches)
        assert any("reused" in w for w in result.warnings)

    def test_hard_court_advisory_on_perfect16_courts(self, make_roster, make_player):
        players = make_roster(15, grade=3) + [make_player(name="Ann", grade=3, nhc=True)]
        courts = [Court(name=f"H{i}") for i in range(1, 5)]
        result = generate_matches(_config(players, courts))

        assert all(m.note == "Perfect 16 Set 1" for m in result.matches)
        ann_court = next(m.court for m in result.matches if players[15].id in m.player_ids)
        assert result.warnings == [f"Court {ann_court} is a hard court but Ann prefers no hard courts"]

    def test_every_pair_meets_once_over_five_sets(self, make_roster, courts):
        players = make_roster(16, grade=2, gender="F")
        meetings = {}
        for set_number in range(1, 6):
            for match in generate_matches(_config(players, courts, set_number=set_number)).matches:
                ids = sorted(match.player_ids)
                for i, a in enumerate(ids):
                    for b in ids[i + 1:]:
                        meetings[(a, b)] = meetings.get((a, b), 0) + 1
        assert len(meetings) == 120
        assert set(meetings.values()) == {1}


# ============================================================================
# Degraded inputs
# ============================================================================


class TestNotEnoughPlayers:
    """Fewer than four eligible players returns only manual matches and a warning."""

    def test_three_players(self, make_roster, courts):
        result = generate_matches(_config(make_roster(3), courts))
        assert result.matches == []
        assert result.warnings == ["Not enough players to generate matches"]

    def test_mixed_format_same_warning(self, make_roster, courts):
        result = generate_matches(_config(make_roster(3), courts, fmt=MatchFormat.MIXED))
        assert result.warnings == [NOT_ENOUGH_PLAYERS_WARNING]

    def test_manual_matches_still_returned(self, make_roster, courts):
        players = make_roster(6)
        manual = Match(court="1", team1=tuple(players[:2]), team2=tuple(players[2:4]),
                       format=MatchFormat.SAME_SEX, is_manual=True)
        result = generate_matches(_config(players, courts, manual_matches=[manual]))
        assert result.matches == [manual]
        assert result.warnings == [NOT_ENOUGH_PLAYERS_WARNING]

    def test_empty_roster(self, courts):
        result = generate_matches(_config([], courts))
        assert result.matches == []
        assert result.sit_out_players == []


class TestEligibility:
    """Only complete, present, available players are drawn."""

    def test_filtered_players_never_drawn(self, make_roster, make_player, courts):
        active = make_roster(8)
        excluded = [
            make_player(is_resting=True),
            make_player(so=True),
            make_player(unavailable_sets={"set2": True}),
            make_player(grade=None),
            make_player(gender=None),
            make_player(name=""),
        ]
        result = generate_matches(_config(active + excluded, courts, set_number=2))
        drawn = {pid for m in result.matches for pid in m.player_ids}
        assert drawn == {p.id for p in active}

    def test_unavailable_other_set_still_drawn(self, make_roster, make_player, courts):
        players = make_roster(3) + [make_player(unavailable_sets=[4])]
        result = generate_matches(_config(players, courts, set_number=1))
        assert len(result.matches) == 1


# ============================================================================
# Courts
# ============================================================================


class TestCourtAssignment:
    """Courts follow manual reservations and are reused cyclically."""

    def test_courts_reused_cyclically(self, make_roster):
        courts = [Court(name=n) for n in ("A", "B", "C")]
        result = generate_matches(_config(make_roster(20), courts))
        assert len(result.matches) == 5
        assert [m.court for m in result.matches] == ["A", "B", "C", "A", "B"]
        assert any("reused" in w for w in result.warnings)

    def test_no_warning_when_courts_suffice(self, make_roster, courts):
        result = generate_matches(_config(make_roster(12), courts))
        assert result.warnings == []

    def test_placeholder_when_no_courts_left(self, make_roster):
        players = make_roster(8)
        manual = Match(court="1", team1=tuple(players[:2]), team2=tuple(players[2:4]),
                       format=MatchFormat.SAME_SEX, is_manual=True)
        result = generate_matches(_config(players, [Court(name="1")], manual_matches=[manual]))
        generated = _generated(result)
        assert [m.court for m in generated] == ["TBD"]
        assert result.warnings == [
            "Generated 1 matches but only 0 courts available. Courts will be reused."
        ]

    def test_assign_courts_does_not_mutate(self, make_roster):
        players = make_roster(4)
        match = Match(team1=tuple(players[:2]), team2=tuple(players[2:]), format=MatchFormat.SAME_SEX)
        stamped = assign_courts([match], ["5"])
        assert stamped[0].court == "5"
        assert match.court is None

    def test_hard_court_advisory(self, make_roster, make_player):
        players = make_roster(3) + [make_player(name="Ann", nhc=True)]
        result = generate_matches(_config(players, [Court(name="H1")]))
        assert result.matches[0].court == "H1"
        assert result.warnings == ["Court H1 is a hard court but Ann prefers no hard courts"]

    def test_court_names_as_string(self, make_roster):
        config = _config(make_roster(8), "1, 2")
        result = generate_matches(config)
        assert [m.court for m in result.matches] == ["1", "2"]


# ============================================================================
# Manual matches and overall integrity
# ============================================================================


class TestManualMatches:
    """Pinned matches come first and their players are excluded."""

    def test_manual_first_and_players_excluded(self, make_roster):
        players = make_roster(12)
        manual = Match(court="1", team1=tuple(players[:2]), team2=tuple(players[2:4]),
                       format=MatchFormat.SAME_SEX, is_manual=True, note="pinned")
        courts = [Court(name=n) for n in ("1", "2", "3")]
        result = generate_matches(_config(players, courts, manual_matches=[manual]))

        assert result.matches[0] == manual
        generated = _generated(result)
        assert len(generated) == 2
        assert [m.court for m in generated] == ["2", "3"]
        manual_ids = set(manual.player_ids)
        assert all(manual_ids.isdisjoint(m.player_ids) for m in generated)
        _assert_no_duplicate_players(result.matches)

    def test_manual_match_disables_perfect16(self, make_roster, courts):
        players = make_roster(20)
        manual = Match(court="1", team1=tuple(players[16:18]), team2=tuple(players[18:20]),
                       format=MatchFormat.SAME_SEX, is_manual=True)
        result = generate_matches(_config(players, courts, manual_matches=[manual]))
        generated = _generated(result)
        assert len(generated) == 4
        assert all(m.note is None for m in generated)


class TestFormats:
    """Both formats keep every player on at most one court."""

    def test_mixed_teams_are_one_man_one_woman(self, make_roster, courts):
        players = make_roster(8, gender="M") + make_roster(8, gender="F")
        result = generate_matches(_config(players, courts, fmt=MatchFormat.MIXED))
        assert len(result.matches) == 4
        for match in result.matches:
            for team in (match.team1, match.team2):
                assert {p.gender for p in team} == {Gender.M, Gender.F}

    @pytest.mark.parametrize("fmt", [MatchFormat.SAME_SEX, MatchFormat.MIXED])
    def test_no_player_twice(self, make_player, courts, fmt):
        players = [
            make_player(grade=g, gender=gender, plus_minus=pm)
            for g in (1, 2, 3, 4, 5)
            for gender in ("M", "F")
            for pm in ("+", "", "-")
        ]
        result = generate_matches(_config(players, courts, fmt=fmt))
        assert result.matches
        _assert_no_duplicate_players(result.matches)
        for match in result.matches:
            assert len(set(match.player_ids)) == 4

    def test_rotation_varies_sets(self, make_roster, courts):
        players = make_roster(8, grade=4)
        set1 = generate_matches(_config(players, courts, set_number=1, rotate=True))
        set2 = generate_matches(_config(players, courts, set_number=2, rotate=True))
        groups1 = {frozenset(m.player_ids) for m in set1.matches}
        groups2 = {frozenset(m.player_ids) for m in set2.matches}
        assert groups1 != groups2

    def test_deterministic(self, make_player, courts):
        players = [make_player(grade=g, gender=gender) for g in (5, 3, 1, 4, 2) for gender in ("M", "F")]
        first = generate_matches(_config(players, courts))
        second = generate_matches(_config(players, courts))
        assert first == second


# ============================================================================
# Validation entry point
# ============================================================================


class TestValidateMatchConfig:
    def test_valid(self, make_roster, courts):
        validation = validate_match_config(_config(make_roster(4), courts))
        assert validation.valid
        assert validation.errors == []

    def test_all_errors_reported(self):
        validation = validate_match_config(_config([], [], set_number=7))
        assert not validation.valid
        assert validation.errors == [
            "Set number must be between 1 and 6",
            "At least one court must be selected",
            "At least one player must be registered",
        ]

    def test_set_zero_invalid(self, make_roster, courts):
        assert not validate_match_config(_config(make_roster(4), courts, set_number=0)).valid

    def test_generation_ignores_validation(self):
        result = generate_matches(_config([], [], set_number=9))
        assert result.warnings == [NOT_ENOUGH_PLAYERS_WARNING]
