"""Horse allocation for practice chukkers.

Usage is counted per assignment entry: a horse ridden by two players in two
chukkers counts twice. Cap checks are advisory; callers decide whether to
write anyway and show the warnings.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from poloclub.exceptions import DomainValidationError, NotFoundError
from poloclub.models import HorseStatus, Lifecycle
from poloclub.schemas.practice import Assignment, Chukker


@dataclass
class AssignmentCheck:
    """Outcome of checking one horse for one (chukker, player) slot."""

    allowed: bool
    usage: int
    warnings: list[str] = field(default_factory=list)


@dataclass
class HorseUsage:
    """Usage of one horse across a practice."""

    horse_id: int
    name: str | None
    usage: int
    max_chukkers_per_day: int | None
    over_limit: bool


@dataclass
class HorseOption:
    """Horse picker entry for one slot."""

    horse_id: int
    name: str
    usage: int
    max_chukkers_per_day: int
    at_limit: bool
    selected: bool


def chukker_index(chukkers: list[Chukker], number: int) -> int:
    """Position of chukker ``number`` in the list."""
    for index, chukker in enumerate(chukkers):
        if chukker.number == number:
            return index
    raise NotFoundError("Chukker", number)


def horse_usage(chukkers: Iterable[Chukker]) -> dict[int, int]:
    """Number of assignment entries per horse id."""
    counts: Counter[int] = Counter()
    for chukker in chukkers:
        for assignment in chukker.assignments:
            counts[assignment.horse_id] += 1
    return dict(counts)


def _is_offered(horse: Any) -> bool:
    return horse.lifecycle != Lifecycle.RETIRED.value and horse.status == HorseStatus.AVAILABLE.value


def check_assignment(
    horse: Any,
    chukkers: list[Chukker],
    number: int,
    player_id: int,
) -> AssignmentCheck:
    """Check whether ``horse`` may go to ``player_id`` in chukker ``number``.

    Re-selecting the horse already on this exact slot is always allowed.
    """
    usage = horse_usage(chukkers).get(horse.id, 0)
    current = chukkers[chukker_index(chukkers, number)].horse_for(player_id)
    if current == horse.id:
        return AssignmentCheck(allowed=True, usage=usage)

    warnings = []
    if horse.lifecycle == Lifecycle.RETIRED.value:
        warnings.append(f"{horse.name} is retired")
    elif horse.status != HorseStatus.AVAILABLE.value:
        warnings.append(f"{horse.name} is not available (status: {horse.status})")
    if usage >= horse.max_chukkers_per_day:
        warnings.append(
            f"{horse.name} is already down for {usage} of {horse.max_chukkers_per_day} chukkers"
        )
    return AssignmentCheck(allowed=not warnings, usage=usage, warnings=warnings)


def horse_options(
    horses: Iterable[Any],
    chukkers: list[Chukker],
    number: int,
    player_id: int,
) -> list[HorseOption]:
    """Horses offered in the picker for a slot: active and available only."""
    usage = horse_usage(chukkers)
    current = chukkers[chukker_index(chukkers, number)].horse_for(player_id)
    options = []
    for horse in horses:
        if not _is_offered(horse):
            continue
        used = usage.get(horse.id, 0)
        options.append(
            HorseOption(
                horse_id=horse.id,
                name=horse.name,
                usage=used,
                max_chukkers_per_day=horse.max_chukkers_per_day,
                at_limit=used >= horse.max_chukkers_per_day,
                selected=current == horse.id,
            )
        )
    return options


def set_assignment(
    chukkers: list[Chukker],
    number: int,
    player_id: int,
    horse_id: int | None,
) -> list[Chukker]:
    """Upsert the player's horse in a chukker; ``horse_id=None`` removes it."""
    index = chukker_index(chukkers, number)
    chukker = chukkers[index]
    assignments = list(chukker.assignments)
    existing = next(
        (i for i, a in enumerate(assignments) if a.player_id == player_id), None
    )
    if existing is not None:
        if horse_id is None:
            del assignments[existing]
        else:
            assignments[existing] = Assignment(player_id=player_id, horse_id=horse_id)
    elif horse_id is not None:
        assignments.append(Assignment(player_id=player_id, horse_id=horse_id))

    updated = list(chukkers)
    updated[index] = chukker.model_copy(update={"assignments": assignments})
    return updated


def new_chukkers(count: int) -> list[Chukker]:
    return [Chukker(number=n) for n in range(1, count + 1)]


def add_chukker(chukkers: list[Chukker]) -> list[Chukker]:
    """Append an empty chukker numbered after the last one."""
    return [*chukkers, Chukker(number=len(chukkers) + 1)]


def remove_chukker(chukkers: list[Chukker], number: int) -> list[Chukker]:
    """Remove a chukker and renumber the rest 1..N."""
    index = chukker_index(chukkers, number)
    if len(chukkers) <= 1:
        raise DomainValidationError("A practice needs at least one chukker")
    remaining = chukkers[:index] + chukkers[index + 1:]
    return [c.model_copy(update={"number": n}) for n, c in enumerate(remaining, 1)]


def usage_report(chukkers: list[Chukker], horses: Iterable[Any]) -> list[HorseUsage]:
    """Usage against the daily cap for every horse used in the practice."""
    by_id = {h.id: h for h in horses}
    report = []
    for horse_id, count in horse_usage(chukkers).items():
        horse = by_id.get(horse_id)
        cap = horse.max_chukkers_per_day if horse else None
        report.append(
            HorseUsage(
                horse_id=horse_id,
                name=horse.name if horse else None,
                usage=count,
                max_chukkers_per_day=cap,
                over_limit=cap is not None and count > cap,
            )
        )
    return sorted(report, key=lambda u: (u.name or "", u.horse_id))
