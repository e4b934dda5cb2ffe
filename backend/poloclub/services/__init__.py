"""Business logic services."""

from poloclub.services.auth_service import AuthService
from poloclub.services.change_feed import ChangeFeed, change_feed
from poloclub.services.completion_service import CompletionService, completion_batch_id
from poloclub.services.horse_service import HorseService
from poloclub.services.player_service import PlayerService
from poloclub.services.practice_service import PracticeService

__all__ = [
    "AuthService",
    "ChangeFeed",
    "CompletionService",
    "HorseService",
    "PlayerService",
    "PracticeService",
    "change_feed",
    "completion_batch_id",
]
