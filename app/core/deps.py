# /app/core/deps.py

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from . import security
from ..db.models.user_model import User
from ..services.database_service import DatabaseService, get_db_service

# auto_error is off so that a missing header is answered with our own 401 body.
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: DatabaseService = Depends(get_db_service),
) -> User:
    """
    Resolves the bearer token on the request to a User.

    A request without a token is unauthenticated (401). A request whose token
    cannot be verified, or points to a user that no longer exists, is
    rejected as forbidden (403).
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = security.decode_access_token(credentials.credentials)
    if not user_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")

    user = db.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")
    return user
