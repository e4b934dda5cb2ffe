"""Tests for team building and balance."""

import pytest

from poloclub.engine import (
    assign_to_team,
    compute_balance,
    move_player,
    remove_from_teams,
    team_handicap,
)
from poloclub.exceptions import DomainValidationError
from poloclub.schemas import Teams, TeamSide

from tests.fixtures.factories import create_chukkers, create_player


@pytest.fixture
def players():
    return [
        create_player(id=1, name="Ana", level=2.0),
        create_player(id=2, name="Bruno", level=4.0),
        create_player(id=3, name="Carla", level=1.0),
    ]


class TestAssignToTeam:
    """Tests for team membership."""

    def test_assign_then_reassign_keeps_sides_disjoint(self):
        """A player moved from A to B appears in exactly one side."""
        teams, chukkers = assign_to_team(Teams(), create_chukkers(), 1, TeamSide.A)
        teams, chukkers = assign_to_team(teams, chukkers, 1, TeamSide.B)

        assert teams.A == []
        assert teams.B == [1]

    def test_assign_twice_to_same_side(self):
        teams, chukkers = assign_to_team(Teams(), create_chukkers(), 1, "A")
        teams, _ = assign_to_team(teams, chukkers, 1, "A")

        assert teams.A == [1]

    def test_does_not_mutate_input(self):
        original = Teams(A=[1])

        assign_to_team(original, [], 2, TeamSide.A)

        assert original.A == [1]

    def test_remove_purges_assignments_in_every_chukker(self):
        """Taking a player off the teams clears all of their horses."""
        chukkers = create_chukkers(
            3,
            {1: [(1, 10), (2, 11)], 2: [(1, 12)], 3: [(2, 10), (1, 10)]},
        )
        teams = Teams(A=[1], B=[2])

        teams, chukkers = remove_from_teams(teams, chukkers, 1)

        assert teams.all_players == [2]
        for chukker in chukkers:
            assert all(a.player_id != 1 for a in chukker.assignments)
        assert [len(c.assignments) for c in chukkers] == [1, 0, 1]

    def test_move_keeps_assignments(self):
        chukkers = create_chukkers(2, {1: [(1, 10)]})

        teams = move_player(Teams(A=[1]), 1, TeamSide.B)

        assert teams.B == [1]
        assert chukkers[0].horse_for(1) == 10

    def test_move_player_not_on_team(self):
        with pytest.raises(DomainValidationError):
            move_player(Teams(A=[1]), 2, TeamSide.B)


class TestBalance:
    """Tests for handicap balance."""

    def test_unbalanced_teams(self, players):
        """A={2,4} vs B={1} gives 6 vs 1, flagged at threshold 2."""
        balance = compute_balance(Teams(A=[1, 2], B=[3]), players, threshold=2.0)

        assert balance.handicap_a == 6
        assert balance.handicap_b == 1
        assert balance.delta == 5
        assert balance.unbalanced is True

    def test_delta_at_threshold_is_balanced(self, players):
        balance = compute_balance(Teams(A=[1], B=[]), players, threshold=2.0)

        assert balance.delta == 2
        assert balance.unbalanced is False

    def test_unknown_players_count_as_zero(self, players):
        assert team_handicap([1, 99], players) == 2.0
