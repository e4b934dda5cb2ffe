"""Practice planning service: teams, chukkers, assignments, scores, RSVPs."""

from datetime import date

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub import engine
from poloclub.config import get_settings
from poloclub.exceptions import DomainValidationError, NotFoundError
from poloclub.models import Practice, PracticeStatus
from poloclub.repositories import HorseRepository, PlayerRepository, PracticeRepository
from poloclub.schemas import (
    AssignmentResult,
    AttendanceResponse,
    Chukker,
    HorseOption,
    HorseUsageItem,
    PracticeCreate,
    PracticeResponse,
    PracticeUpdate,
    ScoreResponse,
    TeamBalanceResponse,
    Teams,
    TeamSide,
)
from poloclub.services.change_feed import ChangeFeed, change_feed

SCORING_STATUSES = (PracticeStatus.IN_PROGRESS.value, PracticeStatus.COMPLETED.value)


def load_documents(practice: Practice) -> tuple[Teams, list[Chukker]]:
    """Typed teams and chukkers of a stored practice."""
    teams = Teams.model_validate(practice.teams or {})
    chukkers = [Chukker.model_validate(c) for c in practice.chukkers or []]
    return teams, chukkers


class PracticeService:
    """Service for practice operations.

    Every edit reads the stored documents, runs the engine and writes back
    whole fields; concurrent editors get last-write-wins.
    """

    def __init__(self, session: AsyncSession, feed: ChangeFeed | None = None):
        self.session = session
        self.feed = feed or change_feed
        self.settings = get_settings()
        self.practice_repo = PracticeRepository(session)
        self.player_repo = PlayerRepository(session)
        self.horse_repo = HorseRepository(session)

    async def get_practice(self, practice_id: int) -> Practice:
        practice = await self.practice_repo.get(practice_id)
        if practice is None:
            raise NotFoundError("Practice", practice_id)
        return practice

    async def get_response(self, practice_id: int) -> PracticeResponse:
        return PracticeResponse.model_validate(await self.get_practice(practice_id))

    async def list_practices(
        self,
        skip: int = 0,
        limit: int = 100,
        status: str | None = None,
    ) -> tuple[list[PracticeResponse], int]:
        """Practices, newest date first."""
        practices = await self.practice_repo.get_latest(skip=skip, limit=limit, status=status)
        total = await self.practice_repo.count({"status": status})
        return [PracticeResponse.model_validate(p) for p in practices], total

    async def get_upcoming(self, today: date | None = None) -> list[PracticeResponse]:
        """Practices players can still RSVP to."""
        practices = await self.practice_repo.get_upcoming(today)
        return [PracticeResponse.model_validate(p) for p in practices]

    async def create_practice(self, data: PracticeCreate) -> PracticeResponse:
        """Create a planned practice with ``chukker_count`` empty chukkers."""
        if data.chukker_count > self.settings.max_chukker_count:
            raise DomainValidationError(
                f"A practice can have at most {self.settings.max_chukker_count} chukkers"
            )

        practice = await self.practice_repo.create(
            {
                "name": data.name,
                "date": data.date,
                "notes": data.notes,
                "status": PracticeStatus.PLANNED.value,
                "teams": Teams().model_dump(),
                "chukkers": [c.model_dump() for c in engine.new_chukkers(data.chukker_count)],
                "confirmed_players": [],
            }
        )
        logger.info(f"Practice created: id={practice.id}, date={practice.date}")
        return self._publish(practice)

    async def update_practice(self, practice_id: int, data: PracticeUpdate) -> PracticeResponse:
        """Edit name, date or notes. Direct status edits bypass the workflow."""
        practice = await self.get_practice(practice_id)
        changes = data.model_dump(exclude_unset=True)
        if changes.get("status") not in (None, practice.status):
            logger.warning(
                f"Practice {practice_id} status edited directly: {practice.status} -> {changes['status']}"
            )
        practice = await self.practice_repo.update(practice_id, changes)
        return self._publish(practice)

    async def delete_practice(self, practice_id: int) -> None:
        deleted = await self.practice_repo.delete(practice_id)
        if not deleted:
            raise NotFoundError("Practice", practice_id)
        logger.info(f"Practice deleted: id={practice_id}")
        self.feed.stage(self.session, f"practices/{practice_id}", None)

    # Teams

    async def assign_team(
        self, practice_id: int, player_id: int, team: TeamSide | str | None
    ) -> PracticeResponse:
        """Put a player on a side, or take them off the teams when ``team`` is None."""
        practice = await self.get_practice(practice_id)
        if team is not None and await self.player_repo.get(player_id) is None:
            raise NotFoundError("Player", player_id)

        teams, chukkers = load_documents(practice)
        teams, chukkers = engine.assign_to_team(teams, chukkers, player_id, team)
        return await self._save(practice, teams=teams, chukkers=chukkers)

    async def move_player(
        self, practice_id: int, player_id: int, to_team: TeamSide | str
    ) -> PracticeResponse:
        practice = await self.get_practice(practice_id)
        teams, _ = load_documents(practice)
        return await self._save(practice, teams=engine.move_player(teams, player_id, to_team))

    async def get_balance(self, practice_id: int) -> TeamBalanceResponse:
        practice = await self.get_practice(practice_id)
        teams, _ = load_documents(practice)
        players = await self.player_repo.get_many(teams.all_players)
        balance = engine.compute_balance(teams, players, self.settings.balance_threshold)
        return TeamBalanceResponse(**vars(balance))

    # Chukkers

    async def add_chukker(self, practice_id: int) -> PracticeResponse:
        practice = await self.get_practice(practice_id)
        _, chukkers = load_documents(practice)
        if len(chukkers) >= self.settings.max_chukker_count:
            raise DomainValidationError(
                f"A practice can have at most {self.settings.max_chukker_count} chukkers"
            )
        return await self._save(practice, chukkers=engine.add_chukker(chukkers))

    async def remove_chukker(self, practice_id: int, number: int) -> PracticeResponse:
        practice = await self.get_practice(practice_id)
        _, chukkers = load_documents(practice)
        return await self._save(practice, chukkers=engine.remove_chukker(chukkers, number))

    async def assign_horse(
        self,
        practice_id: int,
        number: int,
        player_id: int,
        horse_id: int | None,
    ) -> AssignmentResult:
        """Pair a player with a horse in a chukker, or clear the pairing.

        Cap and availability problems are returned as warnings; the write
        still happens.
        """
        practice = await self.get_practice(practice_id)
        teams, chukkers = load_documents(practice)
        if teams.side_of(player_id) is None:
            raise DomainValidationError("Player must be on a team before getting a horse")

        warnings: list[str] = []
        if horse_id is not None:
            horse = await self.horse_repo.get(horse_id)
            if horse is None:
                raise NotFoundError("Horse", horse_id)
            check = engine.check_assignment(horse, chukkers, number, player_id)
            warnings = check.warnings
            for warning in warnings:
                logger.warning(f"Practice {practice_id} chukker {number}: {warning}")

        chukkers = engine.set_assignment(chukkers, number, player_id, horse_id)
        response = await self._save(practice, chukkers=chukkers)
        return AssignmentResult(practice=response, warnings=warnings)

    async def get_horse_usage(self, practice_id: int) -> list[HorseUsageItem]:
        practice = await self.get_practice(practice_id)
        _, chukkers = load_documents(practice)
        horses = await self.horse_repo.get_many(list(engine.horse_usage(chukkers)))
        return [HorseUsageItem(**vars(u)) for u in engine.usage_report(chukkers, horses)]

    async def get_horse_options(
        self, practice_id: int, number: int, player_id: int
    ) -> list[HorseOption]:
        """Picker entries for a slot: available horses with their usage."""
        practice = await self.get_practice(practice_id)
        _, chukkers = load_documents(practice)
        horses = await self.horse_repo.get_available()
        options = engine.horse_options(horses, chukkers, number, player_id)
        return [HorseOption(**vars(o)) for o in options]

    # Scores

    async def set_score(
        self, practice_id: int, number: int, team: TeamSide | str, score: int
    ) -> PracticeResponse:
        practice = await self.get_practice(practice_id)
        if practice.status not in SCORING_STATUSES:
            raise DomainValidationError("Scores can be entered once the practice has started")
        _, chukkers = load_documents(practice)
        return await self._save(practice, chukkers=engine.set_score(chukkers, number, team, score))

    async def get_score(self, practice_id: int) -> ScoreResponse:
        practice = await self.get_practice(practice_id)
        _, chukkers = load_documents(practice)
        total_a, total_b = engine.total_score(chukkers)
        side = engine.winner(chukkers)
        return ScoreResponse(
            total_a=total_a,
            total_b=total_b,
            winner=side.value if side else None,
        )

    # Attendance

    async def toggle_attendance(self, practice_id: int, player_id: int) -> AttendanceResponse:
        """Add the player to the confirmed list, or remove them if already there."""
        practice = await self.get_practice(practice_id)
        if await self.player_repo.get(player_id) is None:
            raise NotFoundError("Player", player_id)

        confirmed = list(practice.confirmed_players or [])
        if player_id in confirmed:
            confirmed = [p for p in confirmed if p != player_id]
        else:
            confirmed.append(player_id)

        response = await self._save(practice, confirmed_players=confirmed)
        return AttendanceResponse(
            practice_id=practice_id,
            player_id=player_id,
            confirmed=player_id in confirmed,
            confirmed_players=response.confirmed_players,
        )

    # Summary

    async def render_summary(self, practice_id: int) -> str:
        """Shareable text for the practice."""
        response = await self.get_response(practice_id)
        players = await self.player_repo.get_many(response.teams.all_players)
        horses = await self.horse_repo.get_many(list(engine.horse_usage(response.chukkers)))
        return engine.render_summary(response, players, horses)

    async def _save(
        self,
        practice: Practice,
        teams: Teams | None = None,
        chukkers: list[Chukker] | None = None,
        confirmed_players: list[int] | None = None,
    ) -> PracticeResponse:
        data = {}
        if teams is not None:
            data["teams"] = teams.model_dump()
        if chukkers is not None:
            data["chukkers"] = [c.model_dump() for c in chukkers]
        if confirmed_players is not None:
            data["confirmed_players"] = confirmed_players

        practice = await self.practice_repo.update(practice.id, data)
        return self._publish(practice)

    def _publish(self, practice: Practice) -> PracticeResponse:
        response = PracticeResponse.model_validate(practice)
        self.feed.stage(self.session, f"practices/{practice.id}", response.model_dump(mode="json"))
        return response
