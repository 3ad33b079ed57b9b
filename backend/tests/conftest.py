import itertools

import pytest

from matchmaker.models import Court, Player

# ============================================================================
# Roster factories
# ============================================================================
# Players get sequential ids and arrival orders so strength ties resolve
# deterministically (arrival order ascending).


@pytest.fixture(name="make_player")
def make_player_fixture():
    counter = itertools.count(1)

    def _make(grade=3, gender="M", plus_minus="", **overrides):
        n = next(counter)
        fields = {
            "id": f"p{n}",
            "name": f"Player {n}",
            "grade": grade,
            "gender": gender,
            "plus_minus": plus_minus,
            "arrival_order": n,
        }
        fields.update(overrides)
        return Player(**fields)

    return _make


@pytest.fixture(name="make_roster")
def make_roster_fixture(make_player):
    def _make(count, grade=3, gender="M", **overrides):
        return [make_player(grade=grade, gender=gender, **overrides) for _ in range(count)]

    return _make


@pytest.fixture(name="courts")
def courts_fixture():
    return [Court(name=name) for name in ("1", "2", "3", "4", "5", "6")]
