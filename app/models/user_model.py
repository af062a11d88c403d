# /app/models/user_model.py

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Signup payload."""
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(..., min_length=6)
    displayName: str = Field(..., min_length=1, validation_alias=AliasChoices("displayName", "display_name"))


class UserLogin(BaseModel):
    # Both optional so the service can answer with "Email and password required".
    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    """The slim user object embedded in auth responses."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    displayName: str = Field(..., validation_alias=AliasChoices("displayName", "display_name"))


class UserProfile(UserPublic):
    bio: Optional[str] = None
    avatar: Optional[str] = None


class UserProfileUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    displayName: Optional[str] = Field(
        default=None, min_length=1, validation_alias=AliasChoices("displayName", "display_name")
    )
    bio: Optional[str] = None
    avatar: Optional[str] = None


class AuthResponse(BaseModel):
    user: UserPublic
    token: str
