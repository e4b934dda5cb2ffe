"""Chukker scores."""

from collections.abc import Iterable

from poloclub.engine.allocation import chukker_index
from poloclub.schemas.practice import Chukker, TeamSide


def set_score(
    chukkers: list[Chukker], number: int, side: TeamSide | str, score: int
) -> list[Chukker]:
    """Replace one side's goals in chukker ``number``."""
    index = chukker_index(chukkers, number)
    key = "score_a" if TeamSide(side) == TeamSide.A else "score_b"
    updated = list(chukkers)
    updated[index] = chukkers[index].model_copy(update={key: max(score, 0)})
    return updated


def total_score(chukkers: Iterable[Chukker]) -> tuple[int, int]:
    """Goals per side summed across chukkers."""
    chukkers = list(chukkers)
    return sum(c.score_a for c in chukkers), sum(c.score_b for c in chukkers)


def winner(chukkers: Iterable[Chukker]) -> TeamSide | None:
    """Side with strictly more goals, or None for a draw."""
    total_a, total_b = total_score(chukkers)
    if total_a > total_b:
        return TeamSide.A
    if total_b > total_a:
        return TeamSide.B
    return None
