"""Data access repositories."""

from poloclub.repositories.base import BaseRepository, LifecycleRepository
from poloclub.repositories.horse_log_repository import HorseLogRepository
from poloclub.repositories.horse_repository import HorseRepository
from poloclub.repositories.player_repository import PlayerRepository
from poloclub.repositories.practice_repository import PracticeRepository
from poloclub.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "LifecycleRepository",
    "HorseRepository",
    "HorseLogRepository",
    "PlayerRepository",
    "PracticeRepository",
    "UserRepository",
]
