"""SQLAlchemy models."""

from poloclub.models.base import Lifecycle
from poloclub.models.horse import Horse, HorseStatus, Suitability, Temperament
from poloclub.models.horse_log import HorseLog, LogType
from poloclub.models.player import Player
from poloclub.models.practice import Practice, PracticeStatus
from poloclub.models.user import User

__all__ = [
    "Horse",
    "HorseLog",
    "Player",
    "Practice",
    "User",
    "Lifecycle",
    "HorseStatus",
    "Suitability",
    "Temperament",
    "LogType",
    "PracticeStatus",
]
