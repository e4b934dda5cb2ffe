"""Sign-in, tokens and role resolution."""

from poloclub.auth.dependencies import get_current_user, oauth2_scheme, require_admin
from poloclub.auth.passwords import hash_password, verify_password
from poloclub.auth.roles import (
    CurrentUser,
    Role,
    RoleResolver,
    email_role_resolver,
    get_role_resolver,
)
from poloclub.auth.tokens import create_access_token, decode_access_token

__all__ = [
    "CurrentUser",
    "Role",
    "RoleResolver",
    "create_access_token",
    "decode_access_token",
    "email_role_resolver",
    "get_current_user",
    "get_role_resolver",
    "hash_password",
    "oauth2_scheme",
    "require_admin",
    "verify_password",
]
