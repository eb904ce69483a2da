# talentshine/services/auth.py
import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from talentshine.core.decorator import db_exception
from talentshine.core.exceptions import (
    AuthError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from talentshine.core.hasher import PasswordHelper
from talentshine.models.user import User
from talentshine.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    @db_exception("Email already registered")
    def register_user(self, request: RegisterRequest) -> User:
        """
        Create a user account.

        The email check runs before the insert; the unique constraint on
        ``users.email`` catches a concurrent duplicate that slips past it.
        """
        if not (
            request.first_name
            and request.last_name
            and request.email
            and request.password
        ):
            raise ValidationError("Missing required fields")

        existing = self.db.query(User).filter(User.email == request.email).first()
        if existing:
            raise ConflictError("Email already registered")

        user = User(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            phone=request.phone,
            password=PasswordHelper.hash_password(request.password),
            balance=request.balance if request.balance is not None else Decimal("0"),
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)

        logger.info(f"Registered user id={user.id} email={user.email}")
        return user

    def login(self, request: LoginRequest) -> User:
        if not request.phone:
            raise NotFoundError("User not found")

        user = self.db.query(User).filter(User.phone == request.phone).first()
        if not user:
            raise NotFoundError("User not found")

        if not PasswordHelper.check_password(request.password, user.password):
            logger.warning(f"Failed login attempt for user id={user.id}")
            raise AuthError("Incorrect password")

        return user
