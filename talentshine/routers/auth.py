from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from talentshine.core.database import get_db
from talentshine.core.limiter import limiter
from talentshine.schemas.auth import (
    InsertResult,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from talentshine.schemas.user import UserResponse
from talentshine.services.auth import AuthService

router = APIRouter(tags=["auth"])


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
def register_user(
    payload: RegisterRequest, db: Session = Depends(get_db)
) -> RegisterResponse:
    """Create a user account from the submitted profile"""
    user = AuthService(db).register_user(payload)
    return RegisterResponse(
        message="User registered successfully",
        result=InsertResult(inserted_id=user.id),
    )


@router.post("/login", response_model=LoginResponse)
@limiter.limit("20/minute")
def login(
    request: Request, payload: LoginRequest, db: Session = Depends(get_db)
) -> LoginResponse:
    user = AuthService(db).login(payload)
    return LoginResponse(
        message="Login successful", user=UserResponse.model_validate(user)
    )
