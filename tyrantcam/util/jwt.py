"""Signed session tokens for the admin cookie."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from tyrantcam.config import AuthSettings

ADMIN_ROLE = "admin"


class TokenPayload(BaseModel):
    """Claims carried by an admin token."""

    sub: str  # AdminUserId as a string
    email: str
    role: str
    iat: datetime | None = None
    exp: datetime


class JWTError(Exception):
    """Token could not be trusted."""


def create_token(admin_id: str, email: str, settings: AuthSettings) -> str:
    """Sign a token for an authenticated admin.

    The token expires ``jwt_expiry_hours`` after issue.
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": admin_id,
        "email": email,
        "role": ADMIN_ROLE,
        "iat": issued_at,
        "exp": issued_at + timedelta(hours=settings.jwt_expiry_hours),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a token and check that it belongs to an admin.

    Raises:
        JWTError: Expired, tampered with, signed with another key, or issued
            for a role other than admin
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    if claims.get("role") != ADMIN_ROLE:
        raise JWTError("Token does not carry the admin role")
    return TokenPayload(**claims)
