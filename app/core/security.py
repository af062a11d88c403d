# /app/core/security.py

"""
Password hashing and JWT helpers used by the authentication flow.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from . import config

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """Issues a signed token whose `sub` claim is the user's ID."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=config.ACCESS_TOKEN_EXPIRE_DAYS))
    payload = {"sub": str(subject), "exp": expire}
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """Returns the user ID carried by a valid token, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except jwt.PyJWTError:
        return None
    return payload.get("sub")
