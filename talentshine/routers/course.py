# talentshine/routers/course.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from talentshine.core.database import get_db
from talentshine.schemas.course import CourseResponse
from talentshine.services.course import CourseService

router = APIRouter(
    prefix="/courses",
    tags=["Courses"],
)


@router.get("", response_model=List[CourseResponse])
def list_courses(db: Session = Depends(get_db)):
    """
    Get every course.
    No pagination or filtering, the catalogue is returned as a whole.
    """
    service = CourseService(db)
    return service.get_courses()
