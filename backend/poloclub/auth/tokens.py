"""JWT access tokens.

Tokens are stateless: signing out means the client drops the token.
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from loguru import logger

from poloclub.config import get_settings
from poloclub.exceptions import AuthenticationError

ISSUER = "poloclub"


def create_access_token(user_id: int, email: str) -> str:
    """Create a signed token carrying the user id in 'sub'."""
    settings = get_settings()
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.auth_token_expire_minutes),
        "iss": ISSUER,
    }
    return jwt.encode(payload, settings.auth_secret_key, algorithm=settings.auth_algorithm)


def decode_access_token(token: str) -> int:
    """Verify a token and return the user id.

    Raises:
        AuthenticationError: Token is malformed, tampered with or expired
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.auth_secret_key,
            algorithms=[settings.auth_algorithm],
            issuer=ISSUER,
        )
    except JWTError as e:
        logger.warning(f"JWT decode failed: {e}")
        raise AuthenticationError("Invalid or expired token") from e

    subject = payload.get("sub")
    if not subject or not str(subject).isdigit():
        raise AuthenticationError("Token missing user ID")
    return int(subject)
