# /app/routers/auth_router.py

"""
Public authentication endpoints:
- User registration (`/signup`)
- User login and token issue (`/login`)

The router only translates between HTTP and the user_service; the rules
(duplicate emails, password checks) live in the service.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.errors import ConflictError
from ..models.user_model import AuthResponse, UserCreate, UserLogin
from ..services import user_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED, summary="Register a New Account")
def signup(user_in: UserCreate, db: DatabaseService = Depends(get_db_service)):
    try:
        return user_service.create_user(db=db, user=user_in)
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/login", response_model=AuthResponse, summary="Log In and Receive a Token")
def login(credentials: UserLogin, db: DatabaseService = Depends(get_db_service)):
    try:
        payload = user_service.authenticate_user(db, email=credentials.email, password=credentials.password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload
