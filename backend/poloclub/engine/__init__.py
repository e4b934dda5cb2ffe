"""Practice allocation engine: pure functions over practice documents."""

from poloclub.engine.allocation import (
    AssignmentCheck,
    HorseOption,
    HorseUsage,
    add_chukker,
    check_assignment,
    chukker_index,
    horse_options,
    horse_usage,
    new_chukkers,
    remove_chukker,
    set_assignment,
    usage_report,
)
from poloclub.engine.scoring import set_score, total_score, winner
from poloclub.engine.summary import render_summary
from poloclub.engine.teams import (
    TeamBalance,
    assign_to_team,
    compute_balance,
    move_player,
    purge_player,
    remove_from_teams,
    team_handicap,
)
from poloclub.engine.workload import (
    WorkloadSummary,
    daily_workload,
    is_overworked,
    weekly_workload,
    workload_summary,
)

__all__ = [
    # Allocation
    "AssignmentCheck",
    "HorseOption",
    "HorseUsage",
    "add_chukker",
    "check_assignment",
    "chukker_index",
    "horse_options",
    "horse_usage",
    "new_chukkers",
    "remove_chukker",
    "set_assignment",
    "usage_report",
    # Scoring
    "set_score",
    "total_score",
    "winner",
    # Summary
    "render_summary",
    # Teams
    "TeamBalance",
    "assign_to_team",
    "compute_balance",
    "move_player",
    "purge_player",
    "remove_from_teams",
    "team_handicap",
    # Workload
    "WorkloadSummary",
    "daily_workload",
    "is_overworked",
    "weekly_workload",
    "workload_summary",
]
