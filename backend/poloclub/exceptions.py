"""Domain exceptions.

Every failure the core reports derives from PoloClubError so callers can
surface it without crashing. The API layer maps each type to a status code.
"""


class PoloClubError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(PoloClubError):
    """A referenced practice, horse, player or log entry does not exist."""

    def __init__(self, entity: str, entity_id: int | str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class DomainValidationError(PoloClubError):
    """Input rejected before any write was attempted."""


class InvalidTransitionError(PoloClubError):
    """Practice status change not allowed by the state machine."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move practice from '{current}' to '{target}'")


class ConflictError(PoloClubError):
    """Write would duplicate a unique value."""


class AuthenticationError(PoloClubError):
    """Credentials or token could not be verified."""


class WriteFailureError(PoloClubError):
    """The underlying persistence call failed."""


class CompletionError(WriteFailureError):
    """Workload batch for a practice could not be written.

    The practice keeps its in-progress status and completion can be retried.
    """

    def __init__(self, practice_id: int, horse_ids: list[int], reason: str):
        self.practice_id = practice_id
        self.horse_ids = horse_ids
        self.reason = reason
        super().__init__(f"Could not complete practice {practice_id}: {reason}")
