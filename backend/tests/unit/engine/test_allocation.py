"""Tests for horse allocation."""

import pytest

from poloclub.engine import (
    add_chukker,
    check_assignment,
    horse_options,
    horse_usage,
    new_chukkers,
    remove_chukker,
    set_assignment,
    usage_report,
)
from poloclub.exceptions import DomainValidationError, NotFoundError
from poloclub.models import HorseStatus, Lifecycle

from tests.fixtures.factories import create_chukkers, create_horse


@pytest.fixture
def horses():
    return [
        create_horse(id=10, name="Bonita", max_chukkers_per_day=2),
        create_horse(id=11, name="Chispa", max_chukkers_per_day=1),
        create_horse(id=12, name="Duquesa", status=HorseStatus.REST.value),
        create_horse(id=13, name="Alma", lifecycle=Lifecycle.RETIRED.value),
    ]


class TestHorseUsage:
    """Tests for usage counting."""

    def test_counts_every_assignment_entry(self):
        """Two players on the same horse in one chukker count twice."""
        chukkers = create_chukkers(3, {1: [(1, 10), (2, 10)], 2: [(1, 11)], 3: [(3, 10)]})

        assert horse_usage(chukkers) == {10: 3, 11: 1}

    def test_empty(self):
        assert horse_usage(new_chukkers(4)) == {}

    def test_reassigning_same_pair_is_idempotent(self):
        chukkers = create_chukkers(2)

        chukkers = set_assignment(chukkers, 1, 1, 10)
        once = horse_usage(chukkers)
        chukkers = set_assignment(chukkers, 1, 1, 10)

        assert horse_usage(chukkers) == once == {10: 1}


class TestSetAssignment:
    """Tests for writing assignments."""

    def test_replaces_players_horse(self):
        chukkers = create_chukkers(2, {1: [(1, 10)]})

        chukkers = set_assignment(chukkers, 1, 1, 11)

        assert chukkers[0].horse_for(1) == 11
        assert len(chukkers[0].assignments) == 1

    def test_clear_assignment(self):
        chukkers = create_chukkers(2, {1: [(1, 10), (2, 11)]})

        chukkers = set_assignment(chukkers, 1, 1, None)

        assert chukkers[0].horse_for(1) is None
        assert chukkers[0].horse_for(2) == 11

    def test_unknown_chukker(self):
        with pytest.raises(NotFoundError):
            set_assignment(create_chukkers(2), 5, 1, 10)


class TestCheckAssignment:
    """Tests for cap and availability warnings."""

    def test_available_horse_under_cap(self, horses):
        check = check_assignment(horses[0], create_chukkers(4), 1, 1)

        assert check.allowed is True
        assert check.warnings == []

    def test_horse_at_cap_warns(self, horses):
        chukkers = create_chukkers(4, {1: [(1, 11)]})

        check = check_assignment(horses[1], chukkers, 2, 2)

        assert check.allowed is False
        assert check.usage == 1
        assert len(check.warnings) == 1

    def test_reselecting_current_horse_is_allowed(self, horses):
        """Picking the horse already on this slot never warns."""
        chukkers = create_chukkers(4, {1: [(1, 11)]})

        check = check_assignment(horses[1], chukkers, 1, 1)

        assert check.allowed is True

    def test_resting_horse_warns(self, horses):
        check = check_assignment(horses[2], create_chukkers(4), 1, 1)

        assert check.allowed is False
        assert "not available" in check.warnings[0]

    def test_retired_horse_warns(self, horses):
        check = check_assignment(horses[3], create_chukkers(4), 1, 1)

        assert check.allowed is False
        assert "retired" in check.warnings[0]


class TestHorseOptions:
    """Tests for the horse picker."""

    def test_only_active_available_horses(self, horses):
        options = horse_options(horses, create_chukkers(4), 1, 1)

        assert [o.horse_id for o in options] == [10, 11]

    def test_marks_usage_and_selection(self, horses):
        chukkers = create_chukkers(4, {1: [(1, 11)], 2: [(1, 10)]})

        options = {o.horse_id: o for o in horse_options(horses, chukkers, 1, 1)}

        assert options[11].selected is True
        assert options[11].at_limit is True
        assert options[10].usage == 1
        assert options[10].selected is False


class TestChukkers:
    """Tests for adding and removing chukkers."""

    def test_new_chukkers_are_numbered(self):
        assert [c.number for c in new_chukkers(4)] == [1, 2, 3, 4]

    def test_add_chukker(self):
        chukkers = add_chukker(new_chukkers(2))

        assert [c.number for c in chukkers] == [1, 2, 3]
        assert chukkers[-1].assignments == []

    def test_remove_renumbers_contiguously(self):
        """Removing chukker 2 of 4 leaves 1..3 with no gaps."""
        chukkers = create_chukkers(4, {3: [(1, 10)]})

        chukkers = remove_chukker(chukkers, 2)

        assert [c.number for c in chukkers] == [1, 2, 3]
        assert chukkers[1].horse_for(1) == 10

    def test_cannot_remove_last_chukker(self):
        with pytest.raises(DomainValidationError):
            remove_chukker(new_chukkers(1), 1)

    def test_remove_unknown_chukker(self):
        with pytest.raises(NotFoundError):
            remove_chukker(new_chukkers(3), 7)


class TestUsageReport:
    """Tests for usage against caps."""

    def test_flags_over_limit(self, horses):
        chukkers = create_chukkers(4, {1: [(1, 11)], 2: [(1, 11)], 3: [(2, 10)]})

        report = {u.horse_id: u for u in usage_report(chukkers, horses)}

        assert report[11].usage == 2
        assert report[11].over_limit is True
        assert report[10].over_limit is False

    def test_unknown_horse_has_no_cap(self):
        chukkers = create_chukkers(1, {1: [(1, 99)]})

        report = usage_report(chukkers, [])

        assert report[0].name is None
        assert report[0].over_limit is False
