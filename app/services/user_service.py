# /app/services/user_service.py

"""
Business logic for accounts: signup, login and profile edits. Knows nothing
about HTTP; failures are raised as ValueError subclasses for the router to map.
"""

import logging
from typing import Dict, Optional

from ..core import security
from ..core.errors import ConflictError, NotFoundError
from ..db.models.user_model import User
from ..models import user_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _auth_payload(user: User) -> Dict:
    return {
        "user": user_model.UserPublic.model_validate(user),
        "token": security.create_access_token(subject=user.id),
    }


def create_user(db: DatabaseService, user: user_model.UserCreate) -> Dict:
    """Registers a new account and returns the user together with a fresh token."""
    email = _normalize_email(user.email)
    if db.get_user_by_email(email):
        raise ConflictError("Email already exists")

    new_user = db.add_user({
        "email": email,
        "password": security.get_password_hash(user.password),
        "display_name": user.displayName.strip(),
    })
    logger.info("Registered new user %s", new_user.id)
    return _auth_payload(new_user)


def authenticate_user(db: DatabaseService, email: Optional[str], password: Optional[str]) -> Optional[Dict]:
    """
    Returns the auth payload for valid credentials, None for wrong ones.
    Raises ValueError when either field is missing.
    """
    if not email or not password:
        raise ValueError("Email and password required")
    user = db.get_user_by_email(_normalize_email(email))
    if not user or not security.verify_password(password, user.password):
        return None
    return _auth_payload(user)


def update_profile(db: DatabaseService, user_id: str, updates: user_model.UserProfileUpdate) -> User:
    update_data = updates.model_dump(exclude_unset=True)
    record = {}
    if "displayName" in update_data and update_data["displayName"] is not None:
        record["display_name"] = update_data["displayName"].strip()
    if "bio" in update_data:
        record["bio"] = update_data["bio"]
    if "avatar" in update_data:
        record["avatar"] = update_data["avatar"]

    if not record:
        user = db.get_user_by_id(user_id)
    else:
        user = db.update_user(user_id, record)
    if user is None:
        raise NotFoundError("User not found")
    return user
