"""Player roster service."""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from poloclub.exceptions import NotFoundError
from poloclub.models import Player
from poloclub.repositories import PlayerRepository
from poloclub.schemas import PlayerCreate, PlayerResponse, PlayerUpdate
from poloclub.services.change_feed import ChangeFeed, change_feed


class PlayerService:
    """Service for player operations."""

    def __init__(self, session: AsyncSession, feed: ChangeFeed | None = None):
        self.session = session
        self.feed = feed or change_feed
        self.player_repo = PlayerRepository(session)

    async def list_players(self) -> tuple[list[PlayerResponse], int]:
        """Active players by name."""
        players = await self.player_repo.get_active()
        total = await self.player_repo.count_active()
        return [PlayerResponse.model_validate(p) for p in players], total

    async def get_player(self, player_id: int) -> Player:
        player = await self.player_repo.get(player_id)
        if player is None:
            raise NotFoundError("Player", player_id)
        return player

    async def create_player(self, data: PlayerCreate) -> PlayerResponse:
        player = await self.player_repo.create(data.model_dump())
        logger.info(f"Player created: id={player.id}, name={player.name}")
        return self._publish(player)

    async def update_player(self, player_id: int, data: PlayerUpdate) -> PlayerResponse:
        player = await self.player_repo.update(player_id, data.model_dump(exclude_unset=True))
        if player is None:
            raise NotFoundError("Player", player_id)
        return self._publish(player)

    async def retire_player(self, player_id: int) -> PlayerResponse:
        """Soft delete."""
        player = await self.player_repo.retire(player_id)
        if player is None:
            raise NotFoundError("Player", player_id)
        logger.info(f"Player retired: id={player.id}, name={player.name}")
        return self._publish(player)

    def _publish(self, player: Player) -> PlayerResponse:
        response = PlayerResponse.model_validate(player)
        self.feed.stage(self.session, f"players/{player.id}", response.model_dump(mode="json"))
        return response
