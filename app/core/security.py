"""
Password hashing and JWT helpers.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext

from app.config import settings
from app.core.errors import InternalError, Unauthorized

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password with argon2 and a fresh random salt."""
    try:
        return pwd_context.hash(password)
    except (ValueError, TypeError) as e:
        raise InternalError(f"Failed to hash password: {e}")


def verify_password(password: str, password_hash: str) -> bool:
    """Return False on mismatch; raise InternalError when the stored hash is unusable."""
    if not password_hash:
        raise InternalError("Invalid password hash: empty")
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError) as e:
        raise InternalError(f"Invalid password hash: {e}")


def create_access_token(user_id: str, email: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expires_at = now + (expires_delta or timedelta(hours=settings.jwt_expiration_hours))
    payload = {
        "sub": user_id,
        "email": email,
        "role": role,
        "iat": int(now.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Dict[str, Any]:
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token has expired")
    except jwt.InvalidTokenError:
        raise Unauthorized("Invalid token")
    if not payload.get("sub"):
        raise Unauthorized("Invalid token")
    return payload
