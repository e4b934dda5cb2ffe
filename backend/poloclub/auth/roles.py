"""Role resolution.

Which identities administer the club is decided by a ``RoleResolver``.
The default resolver reads the configured admin e-mail list; deployments
can override the ``get_role_resolver`` dependency with another source.
"""

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from poloclub.config import get_settings


class Role(str, enum.Enum):
    ADMIN = "admin"
    PLAYER = "player"


RoleResolver = Callable[[str], set[Role]]


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated identity attached to a request."""

    id: int
    email: str
    player_id: int | None = None
    roles: frozenset[Role] = field(default_factory=frozenset)

    @property
    def is_admin(self) -> bool:
        return Role.ADMIN in self.roles


def email_role_resolver(admin_emails: Iterable[str]) -> RoleResolver:
    """Resolver granting admin to an exact, case-insensitive e-mail match."""
    admins = {email.strip().lower() for email in admin_emails}

    def resolve(email: str) -> set[Role]:
        roles = {Role.PLAYER}
        if email.strip().lower() in admins:
            roles.add(Role.ADMIN)
        return roles

    return resolve


def get_role_resolver() -> RoleResolver:
    """Dependency returning the configured resolver."""
    return email_role_resolver(get_settings().admin_emails)
