# talentshine/routers/enrollment.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from talentshine.core.database import get_db
from talentshine.core.exceptions import AppException, InternalError
from talentshine.schemas.enrollment import (
    EnrollmentResponse,
    EnrollRequest,
    EnrollResponse,
)
from talentshine.services.enrollment import EnrollmentService

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Enrollments"],
    responses={404: {"description": "Not found"}},
)


@router.post("/enroll", response_model=EnrollResponse)
def enroll_user(payload: EnrollRequest, db: Session = Depends(get_db)):
    """
    Enroll a user in a course, paying the course price from the user's balance.
    Every failure carries ``success: false`` next to the message.
    """
    service = EnrollmentService(db)
    try:
        balance, enrollment = service.enroll(payload.user_id, payload.course_id)
    except AppException as e:
        e.extra.setdefault("success", False)
        raise
    except SQLAlchemyError as e:
        logger.error(f"Enroll Error: {e}", exc_info=True)
        raise InternalError("Server error", extra={"success": False})

    return EnrollResponse(
        success=True,
        message="Enrolled successfully",
        balance=balance,
        enrollment=EnrollmentResponse.model_validate(enrollment),
    )


@router.get("/enrollments", response_model=List[EnrollmentResponse])
def list_user_enrollments(
    user_id: Optional[str] = Query(None, alias="userId", description="User ID"),
    db: Session = Depends(get_db),
):
    service = EnrollmentService(db)
    return service.get_user_enrollments(user_id)
