"""
Password hashing and access token helpers.

Dependencies: bcrypt, PyJWT, mangaverse.configs
System role: Credential primitives shared by the auth service and seeding
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from mangaverse.configs import get_settings
from mangaverse.core.exceptions import AuthenticationError


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a plaintext password with bcrypt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor (defaults to AUTH_BCRYPT_ROUNDS)

    Returns:
        str: bcrypt hash
    """
    if rounds is None:
        rounds = get_settings().auth.bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def create_access_token(claims: dict[str, Any], expires_in: timedelta | None = None) -> str:
    """
    Sign an access token.

    Args:
        claims: Payload claims (userId, username, email, role)
        expires_in: Lifetime (defaults to AUTH_TOKEN_EXPIRE_DAYS)

    Returns:
        str: Encoded JWT
    """
    auth = get_settings().auth
    if expires_in is None:
        expires_in = timedelta(days=auth.token_expire_days)
    payload = dict(claims)
    payload["exp"] = datetime.now(timezone.utc) + expires_in
    return jwt.encode(payload, auth.jwt_secret, algorithm=auth.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify and decode an access token.

    Args:
        token: Encoded JWT

    Returns:
        dict: Token claims

    Raises:
        AuthenticationError: If the token is malformed, forged or expired
    """
    auth = get_settings().auth
    try:
        return jwt.decode(token, auth.jwt_secret, algorithms=[auth.jwt_algorithm])
    except jwt.PyJWTError as e:
        raise AuthenticationError("Invalid or expired token", {"reason": type(e).__name__}) from e
