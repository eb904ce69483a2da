# talentshine/services/enrollment.py
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import func, update
from sqlalchemy.orm import Session

from talentshine.core.config import settings
from talentshine.core.exceptions import (
    InsufficientFundsError,
    NotFoundError,
    ValidationError,
)
from talentshine.models.enrollment import Enrollment
from talentshine.models.user import User
from talentshine.services.course import CourseService

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Upper bound of the integer primary key columns
MAX_ID = 2**31 - 1


def parse_id(value) -> Optional[int]:
    """Return the integer id encoded in ``value`` or None if it is not a positive integer."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = value
    else:
        value = str(value).strip()
        if not value.isdigit():
            return None
        parsed = int(value)
    return parsed if 0 < parsed <= MAX_ID else None


def _to_decimal(value) -> Decimal:
    if value is None:
        return ZERO
    return Decimal(str(value))


def format_amount(amount: Decimal) -> str:
    """Render an amount without trailing zeros, e.g. 200.00 as 200 and 12.50 as 12.5."""
    return f"{amount.normalize():f}"


class EnrollmentService:
    def __init__(self, db: Session):
        self.db = db

    def _get_user(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def _insufficient(price: Decimal, balance: Decimal) -> InsufficientFundsError:
        shortfall = price - balance
        return InsufficientFundsError(
            f"Insufficient balance. You need {settings.currency_symbol}{format_amount(shortfall)} more to enroll.",
            shortfall=shortfall,
        )

    def enroll(self, user_id, course_id) -> Tuple[Decimal, Enrollment]:
        """
        Charge the course price to the user's balance and record the enrollment.

        The deduction is a guarded update that only applies while the stored
        balance still covers the price, so concurrent enrollments cannot spend
        the same funds twice. The deduction and the enrollment insert share one
        transaction and are rolled back together.

        Returns the new balance and the created enrollment.
        """
        if not user_id or not course_id:
            raise ValidationError("User ID and Course ID required")

        user_pk = parse_id(user_id)
        course_pk = parse_id(course_id)
        if user_pk is None or course_pk is None:
            raise ValidationError("Invalid User ID or Course ID")

        user = self._get_user(user_pk)
        course = CourseService(self.db).get_course(course_pk)
        if not user or not course:
            raise NotFoundError("User or Course not found")

        price = _to_decimal(course.price)
        balance = _to_decimal(user.balance)

        if balance < price:
            raise self._insufficient(price, balance)

        try:
            result = self.db.execute(
                update(User)
                .where(User.id == user.id, func.coalesce(User.balance, 0) >= price)
                .values(balance=func.coalesce(User.balance, 0) - price)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                # Balance changed since it was read
                self.db.rollback()
                self.db.refresh(user)
                logger.warning(
                    f"Enrollment of user={user.id} in course={course.id} lost a balance race"
                )
                raise self._insufficient(price, _to_decimal(user.balance))

            self.db.refresh(user)
            new_balance = _to_decimal(user.balance)

            enrollment = Enrollment(
                user_id=user.id,
                user_name=user.full_name,
                user_phone=user.phone or "",
                course_id=course.id,
                course_title=course.title,
                course_price=price,
                course_image=course.image or "",
                course_description=course.description or "",
                course_topics=list(course.topics or []),
                google_meet_link=course.google_meet or "",
                date=datetime.now(timezone.utc),
            )
            self.db.add(enrollment)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(enrollment)
        logger.info(
            f"Enrolled user={user.id} in course={course.id} "
            f"price={price} balance={new_balance}"
        )
        return new_balance, enrollment

    def get_user_enrollments(self, user_id) -> List[Enrollment]:
        """All enrollments recorded for a user, in no particular order."""
        if not user_id:
            raise ValidationError("User ID required")

        user_pk = parse_id(user_id)
        if user_pk is None:
            raise ValidationError("Invalid User ID")

        return self.db.query(Enrollment).filter(Enrollment.user_id == user_pk).all()
