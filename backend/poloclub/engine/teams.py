"""Team building and handicap balance."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from poloclub.exceptions import DomainValidationError
from poloclub.schemas.practice import Chukker, Teams, TeamSide

DEFAULT_BALANCE_THRESHOLD = 2.0


@dataclass
class TeamBalance:
    """Handicap totals per side and whether the gap is worth flagging."""

    handicap_a: float
    handicap_b: float
    delta: float
    threshold: float
    unbalanced: bool


def _levels(players: Iterable[Any]) -> dict[int, float]:
    return {p.id: p.level or 0 for p in players}


def team_handicap(player_ids: Iterable[int], players: Iterable[Any]) -> float:
    """Sum of member handicaps. Unknown players count as zero."""
    levels = _levels(players)
    return sum(levels.get(player_id, 0) for player_id in player_ids)


def compute_balance(
    teams: Teams,
    players: Iterable[Any],
    threshold: float = DEFAULT_BALANCE_THRESHOLD,
) -> TeamBalance:
    """Compare the two sides. Unbalanced teams are flagged, never rejected."""
    players = list(players)
    handicap_a = team_handicap(teams.A, players)
    handicap_b = team_handicap(teams.B, players)
    delta = abs(handicap_a - handicap_b)
    return TeamBalance(
        handicap_a=handicap_a,
        handicap_b=handicap_b,
        delta=delta,
        threshold=threshold,
        unbalanced=delta > threshold,
    )


def purge_player(chukkers: list[Chukker], player_id: int) -> list[Chukker]:
    """Drop every assignment of ``player_id`` from every chukker."""
    return [
        chukker.model_copy(
            update={"assignments": [a for a in chukker.assignments if a.player_id != player_id]}
        )
        for chukker in chukkers
    ]


def assign_to_team(
    teams: Teams,
    chukkers: list[Chukker],
    player_id: int,
    side: TeamSide | str | None,
) -> tuple[Teams, list[Chukker]]:
    """Put a player on ``side``, or on neither side when ``side`` is None.

    The player is always taken off both sides first, so the sides stay
    disjoint. Taking a player off the teams also clears their horses.
    """
    new_teams = Teams(
        A=[p for p in teams.A if p != player_id],
        B=[p for p in teams.B if p != player_id],
    )
    if side is None:
        return new_teams, purge_player(chukkers, player_id)

    new_teams.members(side).append(player_id)
    return new_teams, list(chukkers)


def remove_from_teams(
    teams: Teams, chukkers: list[Chukker], player_id: int
) -> tuple[Teams, list[Chukker]]:
    return assign_to_team(teams, chukkers, player_id, None)


def move_player(teams: Teams, player_id: int, to_side: TeamSide | str) -> Teams:
    """Switch a player's side. Chukker assignments are left as they are."""
    if teams.side_of(player_id) is None:
        raise DomainValidationError("Player is not on a team")
    new_teams, _ = assign_to_team(teams, [], player_id, to_side)
    return new_teams
